"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All exception messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def parse_failed(position: int, kinds: tuple[str, ...]) -> Diagnostic:
        """Parser returned Failed where the caller required success.

        Args:
            position: Offset of the innermost failure
            kinds: Error kinds of the chain, innermost first

        Returns:
            Diagnostic for PARSE_FAILED
        """
        chain = " <- ".join(reversed(kinds))
        msg = f"Parse failed at offset {position} ({chain})"
        return Diagnostic(
            code=DiagnosticCode.PARSE_FAILED,
            message=msg,
            position=position,
            hint="Check the input against the grammar",
        )

    @staticmethod
    def incomplete_input(needed: int | None) -> Diagnostic:
        """Parser returned Incomplete where the caller had no more data.

        Args:
            needed: Exact number of missing units, or None if unknown

        Returns:
            Diagnostic for INCOMPLETE_INPUT
        """
        if needed is None:
            msg = "Input ended before the parser could decide (unknown amount needed)"
        else:
            msg = f"Input ended before the parser could decide ({needed} more unit(s) needed)"
        return Diagnostic(
            code=DiagnosticCode.INCOMPLETE_INPUT,
            message=msg,
            hint="Resubmit a longer input, or use StreamPolicy.COMPLETE for final buffers",
        )

    @staticmethod
    def trailing_input(position: int, count: int) -> Diagnostic:
        """Parser succeeded without consuming the whole input.

        Args:
            position: Offset of the first unconsumed unit
            count: Number of unconsumed units

        Returns:
            Diagnostic for TRAILING_INPUT
        """
        msg = f"{count} unit(s) left unconsumed at offset {position}"
        return Diagnostic(
            code=DiagnosticCode.TRAILING_INPUT,
            message=msg,
            position=position,
        )

    @staticmethod
    def infinite_loop(combinator: str, position: int) -> Diagnostic:
        """Repetition child succeeded without consuming input.

        Args:
            combinator: Name of the repeating combinator
            position: Offset where no progress was made

        Returns:
            Diagnostic for INFINITE_LOOP
        """
        msg = f"{combinator}: child parser matched without consuming input at offset {position}"
        return Diagnostic(
            code=DiagnosticCode.INFINITE_LOOP,
            message=msg,
            position=position,
            hint="Repeated parsers must consume at least one unit on success",
        )
