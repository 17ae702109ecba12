"""Timestamp formatting utilities."""

from datetime import datetime


def now() -> str:
    """
    Current local time formatted for directory names.

    Returns:
        Timestamp such as "20251114_123456"
    """
    return datetime.now().strftime("%Y%m%d_%H%M%S")
