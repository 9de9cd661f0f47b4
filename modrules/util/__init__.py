# SPDX-License-Identifier: MIT
"""Small shared helpers."""
