"""Tests for repetition combinators.

Covers accumulation, Incomplete propagation, minimum counts and the
zero-progress guard.
"""

from __future__ import annotations

import logging
import operator

import pytest

from nomlite import (
    Done,
    ErrorKind,
    Failed,
    Incomplete,
    InfiniteLoopError,
    Needed,
    StreamPolicy,
    char,
    count,
    digit,
    fold_many0,
    fold_many1,
    many0,
    many1,
    many_m_n,
    many_till,
    map_,
    one_of,
    opt,
    separated_list0,
    separated_list1,
    tag,
)
from nomlite.diagnostics import DiagnosticCode

COMPLETE = StreamPolicy.COMPLETE

# ============================================================================
# MANY0 / MANY1
# ============================================================================


class TestMany0:
    """Zero or more."""

    def test_collects_in_order(self) -> None:
        """Outputs are accumulated in input order."""
        outcome = many0(char("a")).parse("aab")

        assert isinstance(outcome, Done)
        assert outcome.output == ["a", "a"]
        assert outcome.remaining == "b"

    def test_zero_matches(self) -> None:
        """No match is success with an empty list."""
        outcome = many0(char("a")).parse("xyz")

        assert isinstance(outcome, Done)
        assert outcome.output == []
        assert outcome.remaining.offset == 0

    def test_incomplete_discards_progress(self) -> None:
        """A child Incomplete makes the whole repetition Incomplete."""
        assert many0(char("a")).parse("aa") == Incomplete(Needed.exact(1))

    def test_complete_policy_terminates(self) -> None:
        """A COMPLETE child fails at the end, ending the loop."""
        outcome = many0(char("a", policy=COMPLETE)).parse("aa")

        assert isinstance(outcome, Done)
        assert outcome.output == ["a", "a"]
        assert outcome.remaining.is_empty

    def test_zero_progress_raises(self) -> None:
        """A child that matches nothing would loop forever."""
        with pytest.raises(InfiniteLoopError) as exc_info:
            many0(opt(char("a"))).parse("b")

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.INFINITE_LOOP
        assert exc_info.value.diagnostic.position == 0

    def test_zero_progress_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """The guard logs at ERROR before raising."""
        with (
            caplog.at_level(logging.ERROR, logger="nomlite.combinators.multi"),
            pytest.raises(InfiniteLoopError),
        ):
            many0(opt(char("a"))).parse("b")

        assert any("many0" in record.getMessage() for record in caplog.records)

    def test_fresh_list_per_parse(self) -> None:
        """Outputs of separate parses are independent lists."""
        parser = many0(char("a"))

        first = parser.parse("ab")
        second = parser.parse("aab")

        assert isinstance(first, Done)
        assert isinstance(second, Done)
        assert first.output == ["a"]
        assert second.output == ["a", "a"]


class TestMany1:
    """One or more."""

    def test_matches(self) -> None:
        """Same as many0 when something matches."""
        outcome = many1(char("a")).parse("aaab")

        assert isinstance(outcome, Done)
        assert outcome.output == ["a", "a", "a"]

    def test_zero_matches_fails(self) -> None:
        """No match is REPETITION over the child's chain."""
        outcome = many1(char("a")).parse("b")

        assert isinstance(outcome, Failed)
        assert outcome.error.kinds == (ErrorKind.CHAR_MISMATCH, ErrorKind.REPETITION)


# ============================================================================
# BOUNDED REPETITION
# ============================================================================


class TestBounded:
    """many_m_n and count."""

    def test_m_n_stops_at_maximum(self) -> None:
        """The child is not tried again once maximum is reached."""
        outcome = many_m_n(2, 3, char("a")).parse("aaaa")

        assert isinstance(outcome, Done)
        assert outcome.output == ["a", "a", "a"]
        assert outcome.remaining == "a"

    def test_m_n_maximum_needs_no_lookahead(self) -> None:
        """Reaching maximum at end of input is Done, not Incomplete."""
        outcome = many_m_n(1, 2, char("a")).parse("aa")

        assert isinstance(outcome, Done)
        assert outcome.remaining.is_empty

    def test_m_n_below_minimum(self) -> None:
        """Too few matches fail."""
        outcome = many_m_n(2, 3, char("a")).parse("ab")

        assert isinstance(outcome, Failed)
        assert outcome.kind is ErrorKind.REPETITION
        assert outcome.error.outermost.position == 0

    def test_m_n_bad_bounds(self) -> None:
        """minimum must not exceed maximum."""
        with pytest.raises(ValueError, match="minimum <= maximum"):
            many_m_n(3, 2, char("a"))

    def test_count_exact(self) -> None:
        """Exactly n matches."""
        outcome = count(char("a"), 2).parse("aaa")

        assert isinstance(outcome, Done)
        assert outcome.output == ["a", "a"]
        assert outcome.remaining == "a"

    def test_count_short(self) -> None:
        """Fewer than n matches fail."""
        assert isinstance(count(char("a"), 2).parse("ab"), Failed)

    def test_count_zero(self) -> None:
        """count(p, 0) consumes nothing."""
        outcome = count(char("a"), 0).parse("")

        assert isinstance(outcome, Done)
        assert outcome.output == []

    def test_count_negative(self) -> None:
        """Negative counts are rejected."""
        with pytest.raises(ValueError, match="times >= 0"):
            count(char("a"), -1)


# ============================================================================
# FOLDS
# ============================================================================


class TestFolds:
    """Accumulating variants."""

    def test_fold_many0_sums(self) -> None:
        """fold combines each output into the accumulator."""
        parser = fold_many0(map_(one_of("0123456789"), int), lambda: 0, operator.add)

        outcome = parser.parse("123x")

        assert isinstance(outcome, Done)
        assert outcome.output == 6

    def test_fold_many0_fresh_accumulator(self) -> None:
        """init is called for every parse."""
        parser = fold_many0(char("a"), list, lambda acc, item: [*acc, item])

        parser.parse("ab")
        outcome = parser.parse("ab")

        assert isinstance(outcome, Done)
        assert outcome.output == ["a"]

    def test_fold_many1_requires_one(self) -> None:
        """Zero matches fail."""
        outcome = fold_many1(char("a"), lambda: 0, lambda acc, _: acc + 1).parse("x")

        assert isinstance(outcome, Failed)
        assert outcome.kind is ErrorKind.REPETITION


# ============================================================================
# MANY_TILL
# ============================================================================


class TestManyTill:
    """Repeat until a terminator matches."""

    def test_until_terminator(self) -> None:
        """Outputs plus the terminator's output."""
        outcome = many_till(char("a"), tag("END")).parse("aaEND!")

        assert isinstance(outcome, Done)
        items, end = outcome.output
        assert items == ["a", "a"]
        assert end == "END"
        assert outcome.remaining == "!"

    def test_immediate_terminator(self) -> None:
        """Terminator first yields no items."""
        outcome = many_till(char("a"), tag("END")).parse("END")

        assert isinstance(outcome, Done)
        assert outcome.output[0] == []

    def test_child_failure(self) -> None:
        """Neither terminator nor child matching is REPETITION."""
        outcome = many_till(char("a"), tag("END")).parse("abEND")

        assert isinstance(outcome, Failed)
        assert outcome.error.kinds == (ErrorKind.CHAR_MISMATCH, ErrorKind.REPETITION)
        assert outcome.error.innermost.position == 1

    def test_terminator_incomplete(self) -> None:
        """A partial terminator at the end needs more input."""
        assert many_till(char("a"), tag("END")).parse("aaEN") == Incomplete(Needed.exact(1))


# ============================================================================
# SEPARATED LISTS
# ============================================================================


class TestSeparatedLists:
    """Elements with separators between them."""

    def test_list(self) -> None:
        """Separators are dropped."""
        outcome = separated_list0(char(","), digit()).parse("1,2,3;")

        assert isinstance(outcome, Done)
        assert outcome.output == ["1", "2", "3"]
        assert outcome.remaining == ";"

    def test_trailing_separator_not_consumed(self) -> None:
        """A separator without an element stays in the input."""
        outcome = separated_list0(char(","), digit()).parse("1,2,;")

        assert isinstance(outcome, Done)
        assert outcome.output == ["1", "2"]
        assert outcome.remaining == ",;"

    def test_empty_list0(self) -> None:
        """No first element is an empty list."""
        outcome = separated_list0(char(","), digit()).parse(";")

        assert isinstance(outcome, Done)
        assert outcome.output == []

    def test_empty_list1(self) -> None:
        """No first element fails for separated_list1."""
        outcome = separated_list1(char(","), digit()).parse(";")

        assert isinstance(outcome, Failed)
        assert outcome.error.kinds == (ErrorKind.PREDICATE_FAILED, ErrorKind.REPETITION)

    def test_incomplete_element(self) -> None:
        """An element cut off by the end of input is Incomplete."""
        assert separated_list1(char(","), digit()).parse("1,2") == Incomplete(Needed.exact(1))
