"""
Shared utilities for Terminal Wrapped.

Common functionality used across contexts:
- Logger setup with provenance tracking
- Configuration loading
- Report table formatting
- Text and duration formatting
"""

from termwrapped.utils.text_processing import truncate_display
from termwrapped.utils.timestamp import format_duration

__all__ = ["format_duration", "truncate_display"]
