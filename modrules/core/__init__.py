# SPDX-License-Identifier: MIT
"""Core data types: platforms, rules, results and errors."""
