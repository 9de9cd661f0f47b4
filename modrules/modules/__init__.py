# SPDX-License-Identifier: MIT
"""Module and target declarations."""
