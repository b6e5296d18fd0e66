"""Optionality, conditional execution and output transformation.

None of these combinators changes the kind of a child's outcome in a way
that confuses Failed with Incomplete: Incomplete always passes through.
"""

import logging
import threading
from collections.abc import Callable
from typing import Any

from nomlite.enums import ErrorKind
from nomlite.errors import ErrorChain
from nomlite.input import Input
from nomlite.outcome import Done, Failed, Incomplete, Outcome, Parser, fail_at

__all__ = [
    "cond",
    "cond_reduce",
    "context",
    "lazy",
    "map_",
    "map_res",
    "not_",
    "opt",
    "peek",
    "recognize",
    "value",
    "verify",
]

logger = logging.getLogger(__name__)


# ============================================================================
# Optionality and conditions
# ============================================================================


def opt[T](parser: Parser[T]) -> Parser[T | None]:
    """Make parser optional.

    Outcomes:
        Done       → unchanged (present)
        Failed     → Done(original input, None) (absent)
        Incomplete → unchanged; presence cannot be decided yet

    Note: a child whose own output is None is indistinguishable from
    absence. Wrap it with value() if the distinction matters.
    """

    def run(inp: Input) -> Outcome[T | None]:
        outcome = parser.parse(inp)
        if isinstance(outcome, Failed):
            return Done(inp, None)
        return outcome

    return Parser(run, f"opt({parser.name})")


def cond_reduce[T](condition: bool, parser: Parser[T]) -> Parser[T]:
    """Run parser only when condition holds.

    A false condition yields Failed(CONDITION_FAILED) at the input position
    without invoking parser or inspecting the input.
    """

    def run(inp: Input) -> Outcome[T]:
        if not condition:
            return fail_at(ErrorKind.CONDITION_FAILED, inp)
        return parser.parse(inp)

    return Parser(run, f"cond_reduce({condition}, {parser.name})")


def cond[T](condition: bool, parser: Parser[T]) -> Parser[T | None]:
    """Run parser only when condition holds; otherwise Done(input, None)."""

    def run(inp: Input) -> Outcome[T | None]:
        if not condition:
            return Done(inp, None)
        return parser.parse(inp)

    return Parser(run, f"cond({condition}, {parser.name})")


def peek[T](parser: Parser[T]) -> Parser[T]:
    """Run parser without consuming input."""

    def run(inp: Input) -> Outcome[T]:
        outcome = parser.parse(inp)
        if isinstance(outcome, Done):
            return Done(inp, outcome.output)
        return outcome

    return Parser(run, f"peek({parser.name})")


def not_(parser: Parser[Any]) -> Parser[None]:
    """Succeed (consuming nothing) only where parser fails."""

    def run(inp: Input) -> Outcome[None]:
        outcome = parser.parse(inp)
        match outcome:
            case Done():
                return fail_at(ErrorKind.NOT_EXPECTED, inp)
            case Failed():
                return Done(inp, None)
            case Incomplete():
                return outcome

    return Parser(run, f"not({parser.name})")


# ============================================================================
# Transformation
# ============================================================================


def map_[T, U](parser: Parser[T], func: Callable[[T], U]) -> Parser[U]:
    """Apply func to the output of a successful parse."""

    def run(inp: Input) -> Outcome[U]:
        outcome = parser.parse(inp)
        if isinstance(outcome, Done):
            return Done(outcome.remaining, func(outcome.output))
        return outcome

    return Parser(run, f"map({parser.name})")


def map_res[T, U](
    parser: Parser[T],
    func: Callable[[T], U],
    *,
    errors: tuple[type[Exception], ...] = (ValueError,),
    code: int = 0,
) -> Parser[U]:
    """Apply a fallible func to the output of a successful parse.

    func signals failure by raising one of errors. The parse then fails with
    a CUSTOM(code) entry anchored at the ORIGINAL position, as if the child
    had never matched; the exception is kept as the entry's cause. Other
    exceptions propagate.

    Example:
        >>> from nomlite import StreamPolicy, digit
        >>> number = map_res(digit(policy=StreamPolicy.COMPLETE), lambda v: int(v.fragment))
        >>> number.parse("42").output
        42
    """

    def run(inp: Input) -> Outcome[U]:
        outcome = parser.parse(inp)
        if not isinstance(outcome, Done):
            return outcome
        try:
            result = func(outcome.output)
        except errors as exc:
            return Failed(ErrorChain.single(ErrorKind.CUSTOM, inp.offset, code, cause=exc))
        return Done(outcome.remaining, result)

    return Parser(run, f"map_res({parser.name})")


def value[T](result: T, parser: Parser[Any]) -> Parser[T]:
    """Replace a successful output with a fixed value."""
    return map_(parser, lambda _: result)


def recognize(parser: Parser[Any]) -> Parser[Input]:
    """Output the zero-copy view of everything parser consumed."""

    def run(inp: Input) -> Outcome[Input]:
        outcome = parser.parse(inp)
        if isinstance(outcome, Done):
            return Done(outcome.remaining, inp.consumed_until(outcome.remaining))
        return outcome

    return Parser(run, f"recognize({parser.name})")


def verify[T](parser: Parser[T], predicate: Callable[[T], bool]) -> Parser[T]:
    """Keep a successful parse only if predicate accepts its output.

    Rejection is Failed(VERIFY_FAILED) at the original position.
    """

    def run(inp: Input) -> Outcome[T]:
        outcome = parser.parse(inp)
        if isinstance(outcome, Done) and not predicate(outcome.output):
            return fail_at(ErrorKind.VERIFY_FAILED, inp)
        return outcome

    return Parser(run, f"verify({parser.name})")


def context[T](code: int, parser: Parser[T]) -> Parser[T]:
    """Tag failures of parser with CUSTOM(code) at its start offset.

    The child's chain is kept; the new entry goes on the outer end.
    """

    def run(inp: Input) -> Outcome[T]:
        outcome = parser.parse(inp)
        if isinstance(outcome, Failed):
            return outcome.wrap(ErrorKind.CUSTOM, inp.offset, code)
        return outcome

    return Parser(run, f"context({code}, {parser.name})")


# ============================================================================
# Recursion
# ============================================================================


def lazy[T](factory: Callable[[], Parser[T]], name: str = "lazy") -> Parser[T]:
    """Defer building a parser until first use.

    Lets a grammar refer to itself:

        >>> from nomlite import alt, char, delimited, digit
        >>> expr = lazy(lambda: alt([delimited(char("("), expr, char(")")), digit()]))

    The built parser is cached once under a lock; later calls reuse it.
    Recursion depth is bounded only by the interpreter's recursion limit.
    """
    lock = threading.Lock()
    built: list[Parser[T]] = []

    def run(inp: Input) -> Outcome[T]:
        if not built:
            with lock:
                if not built:
                    built.append(factory())
                    logger.debug("Built deferred parser %s: %r", name, built[0])
        return built[0].parse(inp)

    return Parser(run, name)
