"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for the exceptions raised at the
edges of the engine. Parse mismatches themselves never become diagnostics;
they travel as Failed outcomes carrying an ErrorChain.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Caller policy errors (a parse outcome turned into an exception)
        2000-2999: Grammar defects (a parser composition that cannot terminate)
    """

    # Caller policy errors (1000-1999)
    PARSE_FAILED = 1001
    INCOMPLETE_INPUT = 1002
    TRAILING_INPUT = 1003

    # Grammar defects (2000-2999)
    INFINITE_LOOP = 2001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        position: Absolute offset in the backing buffer (None if not applicable)
        hint: Suggestion for fixing the error
    """

    code: DiagnosticCode
    message: str
    position: int | None = None
    hint: str | None = None

    def __post_init__(self) -> None:
        """Validate Diagnostic invariants.

        Raises:
            ValueError: If position is negative.
        """
        if self.position is not None and self.position < 0:
            msg = f"Diagnostic.position must be >= 0, got {self.position}"
            raise ValueError(msg)

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic as a short, single-paragraph string.

        Example output:
            PARSE_FAILED: Parse failed at offset 4 (literal_mismatch)
              = help: Check the input against the grammar

        Returns:
            Formatted error message
        """
        parts = [f"{self.code.name}: {self.message}"]
        if self.hint:
            parts.append(f"  = help: {self.hint}")
        return "\n".join(parts)
