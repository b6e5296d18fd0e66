"""Shared constants for nomlite.

This module provides centralized configuration constants used across
primitives and combinators. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Stream policy: Default end-of-input behavior for unbounded runs
- Character classes: Alphabets backing the built-in class parsers

Python 3.13+. Zero external dependencies.
"""

from nomlite.enums import StreamPolicy

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Stream policy
    "DEFAULT_STREAM_POLICY",
    # Character classes
    "DIGITS",
    "HEX_DIGITS",
    "OCT_DIGITS",
    "ASCII_LETTERS",
    "SPACE_CHARS",
    "MULTISPACE_CHARS",
]

# ============================================================================
# STREAM POLICY
# ============================================================================
#
# tag(), take() and char() report Incomplete whenever the input ends before a
# decision can be made. Character classes are different: a run of digits that
# touches the end of the buffer may or may not be finished. The default keeps
# every primitive consistent with the streaming contract; callers that hold
# the complete input switch a class to StreamPolicy.COMPLETE.
#
# ============================================================================

DEFAULT_STREAM_POLICY: StreamPolicy = StreamPolicy.STREAMING

# ============================================================================
# CHARACTER CLASSES
# ============================================================================

# ASCII only. str.isdigit() accepts Unicode digits such as "²".
DIGITS: str = "0123456789"
HEX_DIGITS: str = "0123456789abcdefABCDEF"
OCT_DIGITS: str = "01234567"
ASCII_LETTERS: str = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Inline whitespace (space, tab) vs. any whitespace including line breaks.
SPACE_CHARS: str = " \t"
MULTISPACE_CHARS: str = " \t\r\n"
