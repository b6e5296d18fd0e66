"""Repetition combinators.

All repetitions share one loop (_fold): apply the child at the current
position, fold its output into an accumulator, and stop on the first Failed.

Rules:
    - Incomplete from the child aborts the whole repetition; nothing already
      matched is kept, the caller retries from the start with more input
    - A child that succeeds without consuming anything would loop forever;
      this raises InfiniteLoopError instead
    - Too few matches give Failed with a REPETITION entry at the start offset
"""

import logging
from collections.abc import Callable
from typing import Any

from nomlite.diagnostics import ErrorTemplate, InfiniteLoopError
from nomlite.enums import ErrorKind
from nomlite.input import Input
from nomlite.outcome import Done, Failed, Incomplete, Outcome, Parser

__all__ = [
    "count",
    "fold_many0",
    "fold_many1",
    "many0",
    "many1",
    "many_m_n",
    "many_till",
    "separated_list0",
    "separated_list1",
]

logger = logging.getLogger(__name__)


def _ensure_progress(combinator: str, before: Input, after: Input) -> None:
    """Raise if a repeated parser matched without consuming input."""
    if after.offset == before.offset:
        diagnostic = ErrorTemplate.infinite_loop(combinator, before.offset)
        logger.error("Aborting repetition: %s", diagnostic.message)
        raise InfiniteLoopError(diagnostic)


def _append[T](items: list[T], item: T) -> list[T]:
    items.append(item)
    return items


def _fold[T, A](
    parser: Parser[T],
    inp: Input,
    minimum: int,
    maximum: int | None,
    init: Callable[[], A],
    fold: Callable[[A, T], A],
    combinator: str,
) -> Outcome[A]:
    accumulator = init()
    current = inp
    matched = 0
    while maximum is None or matched < maximum:
        outcome = parser.parse(current)
        match outcome:
            case Done(remaining=remaining, output=output):
                _ensure_progress(combinator, current, remaining)
                accumulator = fold(accumulator, output)
                current = remaining
                matched += 1
            case Failed():
                if matched < minimum:
                    return outcome.wrap(ErrorKind.REPETITION, inp.offset)
                return Done(current, accumulator)
            case Incomplete():
                return outcome
    return Done(current, accumulator)


# ============================================================================
# many0 / many1 / many_m_n / count
# ============================================================================


def many0[T](parser: Parser[T]) -> Parser[list[T]]:
    """Zero or more repetitions. Never returns Failed.

    Example:
        many0(char("a")) on "aab" → Done("b", ["a", "a"])
        many0(char("a")) on "xyz" → Done("xyz", [])
    """

    def run(inp: Input) -> Outcome[list[T]]:
        return _fold(parser, inp, 0, None, list, _append, "many0")

    return Parser(run, f"many0({parser.name})")


def many1[T](parser: Parser[T]) -> Parser[list[T]]:
    """One or more repetitions; zero is Failed(REPETITION)."""

    def run(inp: Input) -> Outcome[list[T]]:
        return _fold(parser, inp, 1, None, list, _append, "many1")

    return Parser(run, f"many1({parser.name})")


def many_m_n[T](minimum: int, maximum: int, parser: Parser[T]) -> Parser[list[T]]:
    """Between minimum and maximum repetitions, inclusive.

    Stops as soon as maximum is reached, without trying the child again.

    Raises:
        ValueError: If minimum is negative or greater than maximum
    """
    if minimum < 0 or maximum < minimum:
        msg = f"many_m_n() requires 0 <= minimum <= maximum, got {minimum}..{maximum}"
        raise ValueError(msg)

    def run(inp: Input) -> Outcome[list[T]]:
        return _fold(parser, inp, minimum, maximum, list, _append, "many_m_n")

    return Parser(run, f"many_m_n({minimum}, {maximum}, {parser.name})")


def count[T](parser: Parser[T], times: int) -> Parser[list[T]]:
    """Exactly times repetitions."""
    if times < 0:
        msg = f"count() requires times >= 0, got {times}"
        raise ValueError(msg)

    def run(inp: Input) -> Outcome[list[T]]:
        return _fold(parser, inp, times, times, list, _append, "count")

    return Parser(run, f"count({parser.name}, {times})")


def fold_many0[T, A](
    parser: Parser[T], init: Callable[[], A], fold: Callable[[A, T], A]
) -> Parser[A]:
    """Like many0, but folds outputs instead of collecting them.

    Args:
        parser: Repeated parser
        init: Factory for a fresh accumulator (called once per parse)
        fold: Combines the accumulator with one output
    """

    def run(inp: Input) -> Outcome[A]:
        return _fold(parser, inp, 0, None, init, fold, "fold_many0")

    return Parser(run, f"fold_many0({parser.name})")


def fold_many1[T, A](
    parser: Parser[T], init: Callable[[], A], fold: Callable[[A, T], A]
) -> Parser[A]:
    def run(inp: Input) -> Outcome[A]:
        return _fold(parser, inp, 1, None, init, fold, "fold_many1")

    return Parser(run, f"fold_many1({parser.name})")


# ============================================================================
# many_till
# ============================================================================


def many_till[T, E](parser: Parser[T], terminator: Parser[E]) -> Parser[tuple[list[T], E]]:
    """Repeat parser until terminator matches.

    The terminator is tried first at every position, so an immediate match
    yields ([], terminator_output).

    Returns:
        Parser producing (outputs, terminator_output); Failed(REPETITION)
        if parser fails before the terminator ever matches
    """

    def run(inp: Input) -> Outcome[tuple[list[T], E]]:
        outputs: list[T] = []
        current = inp
        while True:
            end = terminator.parse(current)
            match end:
                case Done(remaining=remaining, output=output):
                    return Done(remaining, (outputs, output))
                case Incomplete():
                    return end
            item = parser.parse(current)
            match item:
                case Done(remaining=remaining, output=output):
                    _ensure_progress("many_till", current, remaining)
                    outputs.append(output)
                    current = remaining
                case Failed():
                    return item.wrap(ErrorKind.REPETITION, inp.offset)
                case Incomplete():
                    return item

    return Parser(run, f"many_till({parser.name}, {terminator.name})")


# ============================================================================
# separated lists
# ============================================================================


def _separated[T](
    separator: Parser[Any], parser: Parser[T], inp: Input, minimum: int, combinator: str
) -> Outcome[list[T]]:
    first = parser.parse(inp)
    match first:
        case Failed():
            if minimum > 0:
                return first.wrap(ErrorKind.REPETITION, inp.offset)
            return Done(inp, [])
        case Incomplete():
            return first
    outputs = [first.output]
    current = first.remaining
    while True:
        sep = separator.parse(current)
        match sep:
            case Failed():
                return Done(current, outputs)
            case Incomplete():
                return sep
        item = parser.parse(sep.remaining)
        match item:
            case Failed():
                # separator without a following element is not consumed
                return Done(current, outputs)
            case Incomplete():
                return item
        _ensure_progress(combinator, current, item.remaining)
        outputs.append(item.output)
        current = item.remaining


def separated_list0[T](separator: Parser[Any], parser: Parser[T]) -> Parser[list[T]]:
    """Zero or more elements separated by separator.

    Example:
        separated_list0(char(","), digit()) on "1,2,3;" → Done(";", ["1", "2", "3"])
    """

    def run(inp: Input) -> Outcome[list[T]]:
        return _separated(separator, parser, inp, 0, "separated_list0")

    return Parser(run, f"separated_list0({separator.name}, {parser.name})")


def separated_list1[T](separator: Parser[Any], parser: Parser[T]) -> Parser[list[T]]:
    """One or more elements separated by separator."""

    def run(inp: Input) -> Outcome[list[T]]:
        return _separated(separator, parser, inp, 1, "separated_list1")

    return Parser(run, f"separated_list1({separator.name}, {parser.name})")
