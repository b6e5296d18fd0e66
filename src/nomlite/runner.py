"""Caller-side helpers for turning outcomes into results.

The engine itself never raises on a mismatch. Deciding that a Failed or
Incomplete outcome is fatal is caller policy; these helpers implement the
common policies:

- finish(): Done → (remaining, output); anything else raises
- parse_complete(): the buffer is final, so Incomplete is an error and the
  whole input must be consumed
- trace(): log every outcome of a parser at DEBUG level

Python 3.13+.
"""

import logging
from typing import Any

from nomlite.diagnostics import (
    ErrorTemplate,
    IncompleteInputError,
    ParseFailedError,
    TrailingInputError,
)
from nomlite.input import Buffer, Input
from nomlite.outcome import Done, Failed, Incomplete, Outcome, Parser

__all__ = ["finish", "parse_complete", "trace"]

logger = logging.getLogger(__name__)


def finish[T](outcome: Outcome[T]) -> tuple[Input, T]:
    """Unwrap a Done outcome.

    Args:
        outcome: Result of a parse

    Returns:
        (remaining, output)

    Raises:
        ParseFailedError: If outcome is Failed
        IncompleteInputError: If outcome is Incomplete
    """
    match outcome:
        case Done(remaining=remaining, output=output):
            return remaining, output
        case Failed(error=error):
            innermost = error.innermost
            kinds = tuple(str(kind) for kind in error.kinds)
            logger.debug("Parse failed at offset %d: %s", innermost.position, kinds)
            raise ParseFailedError(ErrorTemplate.parse_failed(innermost.position, kinds), error)
        case Incomplete(needed=needed):
            logger.debug("Parse incomplete, needed=%s", needed.size)
            raise IncompleteInputError(ErrorTemplate.incomplete_input(needed.size), needed)
    msg = f"Not a parse outcome: {outcome!r}"
    raise TypeError(msg)


def parse_complete[T](parser: Parser[T], data: Input | Buffer) -> T:
    """Parse a final buffer that must be consumed entirely.

    Primitives left on the default STREAMING policy still answer Incomplete
    at the end of the buffer, which raises here; build the parser from
    COMPLETE primitives when the buffer is final.

    Example:
        >>> from nomlite import StreamPolicy, char, many1
        >>> parse_complete(many1(char("a", policy=StreamPolicy.COMPLETE)), "aaa")
        ['a', 'a', 'a']

    Raises:
        ParseFailedError: If the parser fails
        IncompleteInputError: If the parser wants more data than the buffer has
        TrailingInputError: If the parser stops before the end of the buffer
    """
    remaining, output = finish(parser.parse(data))
    if not remaining.is_empty:
        diagnostic = ErrorTemplate.trailing_input(remaining.offset, len(remaining))
        logger.debug("Trailing input after %s: %d unit(s)", parser.name, len(remaining))
        raise TrailingInputError(diagnostic, remaining)
    return output


def trace[T](label: str, parser: Parser[T]) -> Parser[T]:
    """Log each invocation of parser and its outcome at DEBUG level.

    The outcome itself is returned unchanged.
    """

    def run(inp: Input) -> Outcome[T]:
        outcome = parser.parse(inp)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s at offset %d -> %s", label, inp.offset, _describe(outcome))
        return outcome

    return Parser(run, f"trace({label}, {parser.name})")


def _describe(outcome: Outcome[Any]) -> str:
    match outcome:
        case Done(remaining=remaining, output=output):
            return f"Done(consumed to {remaining.offset}, output={output!r})"
        case Failed(error=error):
            return f"Failed({', '.join(str(kind) for kind in error.kinds)})"
        case Incomplete(needed=needed):
            return f"Incomplete(needed={needed.size if needed.is_known else 'unknown'})"
    return repr(outcome)
