# SPDX-License-Identifier: MIT
"""Configuration settings and toolchain discovery."""
