"""nomlite exception hierarchy with structured diagnostics.

Exceptions are never used for ordinary mismatches; those are Failed
outcomes. They cover two situations only: a caller asking the runner to turn
an outcome into a hard result, and a grammar that cannot terminate.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from nomlite.errors import ErrorChain
    from nomlite.input import Input
    from nomlite.outcome import Needed


class CombinatorError(Exception):
    """Base exception for all nomlite errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CombinatorError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ParseFailedError(CombinatorError):
    """A Failed outcome escalated by the caller.

    Attributes:
        error: The full error chain of the failed outcome
    """

    def __init__(self, message: str | Diagnostic, error: ErrorChain) -> None:
        super().__init__(message)
        self.error = error


class IncompleteInputError(CombinatorError):
    """An Incomplete outcome where the caller has no more data to offer.

    Attributes:
        needed: How much more input the parser asked for
    """

    def __init__(self, message: str | Diagnostic, needed: Needed) -> None:
        super().__init__(message)
        self.needed = needed


class TrailingInputError(CombinatorError):
    """Parser succeeded but left input the caller required to be consumed.

    Attributes:
        remaining: The unconsumed suffix
    """

    def __init__(self, message: str | Diagnostic, remaining: Input) -> None:
        super().__init__(message)
        self.remaining = remaining


class InfiniteLoopError(CombinatorError):
    """A repeated parser succeeded without consuming input.

    This is a defect in the parser composition (for example many0(opt(p))),
    not a property of the input being parsed.
    """
