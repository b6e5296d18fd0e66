"""Tests for diagnostic codes, templates and the exception hierarchy."""

from __future__ import annotations

import pytest

from nomlite import CombinatorError, InfiniteLoopError
from nomlite.diagnostics import Diagnostic, DiagnosticCode, ErrorTemplate


class TestDiagnostic:
    """Diagnostic data structure."""

    def test_str_is_message(self) -> None:
        """str() gives the bare message."""
        diagnostic = Diagnostic(DiagnosticCode.PARSE_FAILED, "boom", position=3)

        assert str(diagnostic) == "boom"

    def test_format_with_hint(self) -> None:
        """Hints are rendered on a help line."""
        diagnostic = Diagnostic(DiagnosticCode.TRAILING_INPUT, "left over", hint="consume it")

        assert diagnostic.format_error() == "TRAILING_INPUT: left over\n  = help: consume it"

    def test_format_without_hint(self) -> None:
        """No help line without a hint."""
        diagnostic = Diagnostic(DiagnosticCode.INFINITE_LOOP, "stuck")

        assert diagnostic.format_error() == "INFINITE_LOOP: stuck"

    def test_negative_position_rejected(self) -> None:
        """Positions are buffer offsets."""
        with pytest.raises(ValueError, match="position"):
            Diagnostic(DiagnosticCode.PARSE_FAILED, "x", position=-1)

    def test_codes_are_unique(self) -> None:
        """Each code has its own number."""
        values = [code.value for code in DiagnosticCode]

        assert len(values) == len(set(values))


class TestErrorTemplate:
    """Message templates."""

    def test_parse_failed_orders_outer_first(self) -> None:
        """The chain reads from the caller's context inwards."""
        diagnostic = ErrorTemplate.parse_failed(4, ("char_mismatch", "repetition"))

        assert diagnostic.message == "Parse failed at offset 4 (repetition <- char_mismatch)"
        assert diagnostic.position == 4

    def test_incomplete_known(self) -> None:
        """Known amounts are stated."""
        assert "3 more unit(s)" in ErrorTemplate.incomplete_input(3).message

    def test_incomplete_unknown(self) -> None:
        """Unknown amounts are stated as unknown."""
        assert "unknown amount" in ErrorTemplate.incomplete_input(None).message

    def test_trailing_input(self) -> None:
        """Count and position."""
        diagnostic = ErrorTemplate.trailing_input(5, 2)

        assert diagnostic.message == "2 unit(s) left unconsumed at offset 5"
        assert diagnostic.code is DiagnosticCode.TRAILING_INPUT

    def test_infinite_loop(self) -> None:
        """Names the combinator."""
        diagnostic = ErrorTemplate.infinite_loop("many1", 9)

        assert diagnostic.message.startswith("many1:")
        assert diagnostic.hint is not None


class TestCombinatorError:
    """Base exception accepts a string or a Diagnostic."""

    def test_plain_message(self) -> None:
        """String messages carry no diagnostic."""
        error = CombinatorError("plain")

        assert str(error) == "plain"
        assert error.diagnostic is None

    def test_diagnostic_message(self) -> None:
        """Diagnostics are formatted into the message."""
        diagnostic = ErrorTemplate.infinite_loop("many0", 0)

        error = InfiniteLoopError(diagnostic)

        assert error.diagnostic is diagnostic
        assert str(error).startswith("INFINITE_LOOP: many0:")
