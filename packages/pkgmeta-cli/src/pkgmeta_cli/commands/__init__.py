# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import init, readme, validate, bump, compare

__all__ = ["init", "readme", "validate", "bump", "compare"]
