"""Sequencing combinators.

sequence() runs a fixed list of steps against one starting position,
threading each step's remaining input into the next. The tuple-style helpers
(pair, preceded, delimited, ...) are thin projections over the same loop.

Short-circuit rules:
    - First Failed aborts; the chain gains a SEQUENCE entry at the
      sequence's start offset (no partial output is meaningful)
    - First Incomplete is returned unchanged
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from nomlite.enums import ErrorKind
from nomlite.input import Input
from nomlite.outcome import Done, Failed, Incomplete, Outcome, Parser

__all__ = [
    "Step",
    "bind",
    "delimited",
    "discard",
    "pair",
    "preceded",
    "separated_pair",
    "sequence",
    "terminated",
    "tuple_",
]


@dataclass(frozen=True, slots=True)
class Step:
    """One step of a sequence.

    Attributes:
        parser: Parser to run at the current position
        slot: Name under which the output is captured, None to discard it
    """

    parser: Parser[Any]
    slot: str | None = None


def bind(slot: str, parser: Parser[Any]) -> Step:
    """Run parser and capture its output as keyword argument slot."""
    if not slot.isidentifier():
        msg = f"bind() slot must be a valid identifier, got {slot!r}"
        raise ValueError(msg)
    return Step(parser, slot)


def discard(parser: Parser[Any]) -> Step:
    """Run parser and ignore its output."""
    return Step(parser, None)


def _thread(parsers: Sequence[Parser[Any]], inp: Input) -> Outcome[list[Any]]:
    """Run parsers back to back, collecting every output."""
    outputs: list[Any] = []
    current = inp
    for parser in parsers:
        outcome = parser.parse(current)
        match outcome:
            case Done(remaining=remaining, output=output):
                outputs.append(output)
                current = remaining
            case Failed():
                return outcome.wrap(ErrorKind.SEQUENCE, inp.offset)
            case Incomplete():
                return outcome
    return Done(current, outputs)


def sequence[T](steps: Sequence[Step], constructor: Callable[..., T]) -> Parser[T]:
    """Build a parser from ordered bind/discard steps and a constructor.

    Example:
        >>> point = sequence(
        ...     [bind("x", digit()), discard(char(",")), bind("y", digit())],
        ...     lambda x, y: (x.fragment, y.fragment),
        ... )

    Args:
        steps: Steps made with bind() and discard()
        constructor: Called with the captured slots as keyword arguments

    Returns:
        Parser producing constructor(**slots)

    Raises:
        ValueError: If steps is empty or two steps bind the same slot
    """
    steps = tuple(steps)
    if not steps:
        msg = "sequence() requires at least one step"
        raise ValueError(msg)
    slots = [step.slot for step in steps if step.slot is not None]
    if len(slots) != len(set(slots)):
        msg = f"sequence() slot names must be unique, got {slots}"
        raise ValueError(msg)
    parsers = [step.parser for step in steps]

    def run(inp: Input) -> Outcome[T]:
        outcome = _thread(parsers, inp)
        if not isinstance(outcome, Done):
            return outcome
        captured = {
            step.slot: output
            for step, output in zip(steps, outcome.output, strict=True)
            if step.slot is not None
        }
        return Done(outcome.remaining, constructor(**captured))

    return Parser(run, "sequence(" + ", ".join(p.name for p in parsers) + ")")


def _project[T](
    parsers: Sequence[Parser[Any]], select: Callable[[list[Any]], T], name: str
) -> Parser[T]:
    def run(inp: Input) -> Outcome[T]:
        outcome = _thread(parsers, inp)
        if isinstance(outcome, Done):
            return Done(outcome.remaining, select(outcome.output))
        return outcome

    return Parser(run, name + "(" + ", ".join(p.name for p in parsers) + ")")


def tuple_(*parsers: Parser[Any]) -> Parser[tuple[Any, ...]]:
    """Run parsers in order; output is the tuple of their outputs."""
    if not parsers:
        msg = "tuple_() requires at least one parser"
        raise ValueError(msg)
    return _project(parsers, tuple, "tuple")


def pair(first: Parser[Any], second: Parser[Any]) -> Parser[tuple[Any, Any]]:
    return _project((first, second), tuple, "pair")


def preceded[T](prefix: Parser[Any], parser: Parser[T]) -> Parser[T]:
    """Run prefix then parser; keep parser's output."""
    return _project((prefix, parser), lambda outputs: outputs[1], "preceded")


def terminated[T](parser: Parser[T], suffix: Parser[Any]) -> Parser[T]:
    """Run parser then suffix; keep parser's output."""
    return _project((parser, suffix), lambda outputs: outputs[0], "terminated")


def delimited[T](open_: Parser[Any], parser: Parser[T], close: Parser[Any]) -> Parser[T]:
    """Run open_, parser, close; keep the middle output."""
    return _project((open_, parser, close), lambda outputs: outputs[1], "delimited")


def separated_pair(
    first: Parser[Any], separator: Parser[Any], second: Parser[Any]
) -> Parser[tuple[Any, Any]]:
    return _project(
        (first, separator, second),
        lambda outputs: (outputs[0], outputs[2]),
        "separated_pair",
    )
