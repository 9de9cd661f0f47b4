# SPDX-License-Identifier: MIT
"""Link configuration for bundled third-party libraries."""
