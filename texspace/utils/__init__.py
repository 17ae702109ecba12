"""
Shared utilities for texspace.

Common functionality used across contexts:
- Logger configuration
- Timestamps for log directories
"""

from texspace.utils.timestamp import now

__all__ = ["now"]
