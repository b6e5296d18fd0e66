"""Ordered alternation.

alt() is leftmost-match, not longest-match: the first candidate to succeed
wins even if a later one would consume more. This is a documented policy.

Failure reporting:
    When every candidate fails, the chain of the LAST candidate tried is
    kept and an ALTERNATIVES_EXHAUSTED entry is added at the start offset.
    Earlier candidates' chains are dropped, which keeps the result
    deterministic and the chain short.
"""

from collections.abc import Sequence

from nomlite.enums import ErrorKind
from nomlite.input import Input
from nomlite.outcome import Failed, Outcome, Parser

__all__ = ["alt"]


def alt[T](parsers: Sequence[Parser[T]]) -> Parser[T]:
    """Try candidates in order against the same input.

    Outcomes:
        - First Done wins; later candidates are not run
        - First Incomplete is returned at once: more data might let that
          candidate succeed, so shorter alternatives cannot be trusted yet
        - All Failed → Failed(ALTERNATIVES_EXHAUSTED) over the last chain

    Args:
        parsers: Non-empty ordered candidates

    Raises:
        ValueError: If parsers is empty
    """
    candidates = tuple(parsers)
    if not candidates:
        msg = "alt() requires at least one candidate"
        raise ValueError(msg)

    def run(inp: Input) -> Outcome[T]:
        last_failure: Failed | None = None
        for candidate in candidates:
            outcome = candidate.parse(inp)
            if not isinstance(outcome, Failed):
                return outcome
            last_failure = outcome
        assert last_failure is not None  # candidates is non-empty
        return last_failure.wrap(ErrorKind.ALTERNATIVES_EXHAUSTED, inp.offset)

    return Parser(run, "alt(" + " | ".join(c.name for c in candidates) + ")")
