"""Fuzz property-based tests for the streaming contract.

A streaming grammar must never decide differently on a prefix than on the
full buffer: any Done or Failed seen on a prefix is final.
"""

from __future__ import annotations

import pytest
from hypothesis import event, example, given, settings

from nomlite import (
    Done,
    Failed,
    Incomplete,
    Input,
    Outcome,
    Parser,
    alpha,
    alt,
    char,
    digit,
    many0,
    opt,
    separated_list1,
    tag,
    terminated,
)
from tests.strategies import chunked_texts

pytestmark = pytest.mark.fuzz

STREAM_ALPHABET = "ab 1,;"

# Appended to every generated text so the full buffer always decides.
END_MARK = "."


def _trailer() -> Parser[object]:
    return terminated(many0(char(" ")), opt(char(";")))


def _grammar() -> Parser[list[Input]]:
    item = alt([digit(), alpha(), tag("  ")])
    return terminated(separated_list1(char(","), item), _trailer())


def _decision(outcome: Outcome[object]) -> tuple[object, ...]:
    match outcome:
        case Done(remaining=remaining, output=output):
            return ("done", remaining.offset, output)
        case Failed(error=error):
            return ("failed", error.entries)
    return ("incomplete",)


@pytest.mark.fuzz
class TestStreamingEquivalence:
    """Prefix decisions agree with whole-buffer decisions."""

    @given(case=chunked_texts(STREAM_ALPHABET))
    @example(case=("12,ab;", [2, 4, 6]))
    @example(case=("1,  ,b", [3, 4, 6]))
    @settings(max_examples=500, deadline=None)
    def test_prefix_decisions_are_final(self, case: tuple[str, list[int]]) -> None:
        """PROPERTY: a non-Incomplete outcome on any prefix equals the one on the full buffer."""
        text, cuts = case
        source = text + END_MARK
        parser = _grammar()

        full = parser.parse(source)
        assert not isinstance(full, Incomplete)

        for cut in cuts:
            outcome = parser.parse(Input(source, 0, cut))
            if isinstance(outcome, Incomplete):
                event("prefix=incomplete")
                continue
            event(f"prefix={_decision(outcome)[0]}")
            assert _decision(outcome) == _decision(full)

    @given(case=chunked_texts(STREAM_ALPHABET))
    @settings(max_examples=300, deadline=None)
    def test_refill_loop_converges(self, case: tuple[str, list[int]]) -> None:
        """PROPERTY: retrying on a growing buffer ends in the full decision."""
        text, cuts = case
        source = text + END_MARK
        parser = _grammar()
        attempts = 0
        outcome: Outcome[list[Input]] | None = None

        for cut in [*cuts, len(source)]:
            attempts += 1
            outcome = parser.parse(source[:cut])
            if not isinstance(outcome, Incomplete):
                break

        event(f"attempts={attempts}")
        assert outcome is not None
        assert not isinstance(outcome, Incomplete)
        assert _decision(outcome) == _decision(parser.parse(source))
