# SPDX-License-Identifier: MIT
"""Compiler toolchain discovery."""
