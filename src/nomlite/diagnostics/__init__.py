"""Diagnostic system for nomlite errors.

Provides the exception hierarchy raised at the edges of the engine and the
structured diagnostics those exceptions carry.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    CombinatorError,
    IncompleteInputError,
    InfiniteLoopError,
    ParseFailedError,
    TrailingInputError,
)
from .templates import ErrorTemplate

__all__ = [
    "CombinatorError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "IncompleteInputError",
    "InfiniteLoopError",
    "ParseFailedError",
    "TrailingInputError",
]
