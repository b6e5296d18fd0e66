"""Primitive parsers.

This module provides the atomic matchers every grammar is built from:
literal tags, fixed-length takes, single units and character classes.

Contract shared by every primitive:
    - Done consumes a non-empty prefix (except take_until and eof, which
      may legitimately match nothing)
    - Failed leaves the input untouched and records one ErrorChain entry
    - Incomplete is returned only when the answer could change once more
      input arrives

Character classes never succeed on an empty run. A zero-width success would
let many0(digit()) spin forever on non-digit input.
"""

from collections.abc import Callable, Collection

from nomlite.constants import (
    ASCII_LETTERS,
    DEFAULT_STREAM_POLICY,
    DIGITS,
    HEX_DIGITS,
    MULTISPACE_CHARS,
    OCT_DIGITS,
    SPACE_CHARS,
)
from nomlite.enums import ErrorKind, StreamPolicy
from nomlite.input import Buffer, Input, Unit
from nomlite.outcome import Done, Incomplete, Needed, Outcome, Parser, fail_at

__all__ = [
    "alpha",
    "alphanumeric",
    "char",
    "digit",
    "eof",
    "hex_digit",
    "line_ending",
    "multispace",
    "none_of",
    "oct_digit",
    "one_of",
    "satisfy",
    "space",
    "tag",
    "tag_no_case",
    "take",
    "take_till1",
    "take_until",
    "take_while1",
]


# ============================================================================
# Helpers
# ============================================================================


def _normalize_literal(literal: Buffer) -> str | bytes:
    if isinstance(literal, str):
        return literal
    if isinstance(literal, (bytes, bytearray, memoryview)):
        return bytes(literal)
    msg = f"Literal must be str or bytes-like, got {type(literal).__name__}"
    raise TypeError(msg)


def _check_kind(inp: Input, literal: str | bytes, parser_name: str) -> None:
    if not inp.same_kind(literal):
        expected = "text" if isinstance(literal, str) else "binary"
        actual = "text" if inp.is_text else "binary"
        msg = f"{parser_name}: {expected} literal applied to {actual} input"
        raise TypeError(msg)


def _to_units(members: Collection[Unit] | str | bytes) -> tuple[frozenset[Unit], str | bytes | None]:
    """Split a set given as str/bytes into units.

    Returns:
        (units, literal) where literal is the original str/bytes used for kind
        checks, or None if members was already a collection of units
    """
    if isinstance(members, str):
        return frozenset(members), members
    if isinstance(members, (bytes, bytearray)):
        data = bytes(members)
        return frozenset(bytes([b]) for b in data), data
    return frozenset(members), None


def _ascii_class(alphabet: str) -> Callable[[Unit], bool]:
    """Membership test accepting both text and byte units."""
    members = frozenset(alphabet) | frozenset(bytes([b]) for b in alphabet.encode("ascii"))
    return members.__contains__


def _as_unit(inp: Input, text: str) -> Unit:
    return text if inp.is_text else text.encode("ascii")


# ============================================================================
# Literal and length primitives
# ============================================================================


def tag(literal: Buffer) -> Parser[Input]:
    """Match literal exactly (case-sensitive, no normalization).

    Examples:
        tag("nom") on "nominal" → Done("inal", "nom")
        tag("nom") on "no"      → Incomplete(Needed.exact(1))
        tag("nom") on "nap"     → Failed(LITERAL_MISMATCH)

    Args:
        literal: Non-empty str (for text input) or bytes (for binary input)

    Returns:
        Parser whose output is the zero-copy view of the matched units
    """
    literal = _normalize_literal(literal)
    size = len(literal)
    if size == 0:
        msg = "tag() literal must not be empty"
        raise ValueError(msg)

    def run(inp: Input) -> Outcome[Input]:
        _check_kind(inp, literal, "tag")
        if inp.startswith(literal):
            head, rest = inp.split_at(size)
            return Done(rest, head)
        if len(inp) < size and inp.common_prefix_length(literal) == len(inp):
            return Incomplete(Needed.exact(size - len(inp)))
        return fail_at(ErrorKind.LITERAL_MISMATCH, inp)

    return Parser(run, f"tag({literal!r})")


def tag_no_case(literal: Buffer) -> Parser[Input]:
    """Match literal ignoring case, unit by unit.

    Binary input is compared with ASCII case folding only.
    """
    literal = _normalize_literal(literal)
    size = len(literal)
    if size == 0:
        msg = "tag_no_case() literal must not be empty"
        raise ValueError(msg)
    folded = [literal[i : i + 1].lower() for i in range(size)]

    def run(inp: Input) -> Outcome[Input]:
        _check_kind(inp, literal, "tag_no_case")
        limit = min(size, len(inp))
        for index in range(limit):
            if inp.unit_at(index).lower() != folded[index]:
                return fail_at(ErrorKind.LITERAL_MISMATCH, inp)
        if limit < size:
            return Incomplete(Needed.exact(size - limit))
        head, rest = inp.split_at(size)
        return Done(rest, head)

    return Parser(run, f"tag_no_case({literal!r})")


def take(count: int) -> Parser[Input]:
    """Consume exactly count units.

    Never fails: either count units are available, or the parser reports
    how many are missing.
    """
    if count < 1:
        msg = f"take() count must be >= 1, got {count}"
        raise ValueError(msg)

    def run(inp: Input) -> Outcome[Input]:
        if len(inp) < count:
            return Incomplete(Needed.exact(count - len(inp)))
        head, rest = inp.split_at(count)
        return Done(rest, head)

    return Parser(run, f"take({count})")


def take_until(
    literal: Buffer, *, policy: StreamPolicy = DEFAULT_STREAM_POLICY
) -> Parser[Input]:
    """Consume everything before the first occurrence of literal.

    The literal itself is not consumed. The match may be empty when the
    input starts with literal.

    If literal does not occur, STREAMING reports Incomplete(unknown) and
    COMPLETE reports Failed(LITERAL_MISMATCH).
    """
    literal = _normalize_literal(literal)
    if len(literal) == 0:
        msg = "take_until() literal must not be empty"
        raise ValueError(msg)

    def run(inp: Input) -> Outcome[Input]:
        _check_kind(inp, literal, "take_until")
        found = inp.find(literal)
        if found < 0:
            if policy is StreamPolicy.STREAMING:
                return Incomplete(Needed.unknown())
            return fail_at(ErrorKind.LITERAL_MISMATCH, inp)
        head, rest = inp.split_at(found)
        return Done(rest, head)

    return Parser(run, f"take_until({literal!r})")


# ============================================================================
# Single-unit primitives
# ============================================================================


def satisfy(
    predicate: Callable[[Unit], bool],
    name: str = "satisfy",
    *,
    policy: StreamPolicy = DEFAULT_STREAM_POLICY,
) -> Parser[Unit]:
    """Consume one unit accepted by predicate.

    Empty input:
        STREAMING → Incomplete(Needed.exact(1))
        COMPLETE  → Failed(CHAR_MISMATCH)

    Returns:
        Parser whose output is the unit (length-1 str or bytes)
    """

    def run(inp: Input) -> Outcome[Unit]:
        if inp.is_empty:
            if policy is StreamPolicy.COMPLETE:
                return fail_at(ErrorKind.CHAR_MISMATCH, inp)
            return Incomplete(Needed.exact(1))
        unit = inp.unit_at(0)
        if not predicate(unit):
            return fail_at(ErrorKind.CHAR_MISMATCH, inp)
        return Done(inp.advance(1), unit)

    return Parser(run, name)


def char(
    expected: str | bytes | int, *, policy: StreamPolicy = DEFAULT_STREAM_POLICY
) -> Parser[Unit]:
    """Match a single unit.

    Args:
        expected: One character, one byte as bytes, or a byte value as int
        policy: Empty-input behavior, as for satisfy()
    """
    if isinstance(expected, int):
        expected = bytes([expected])
    expected = _normalize_literal(expected)
    if len(expected) != 1:
        msg = f"char() expects exactly one unit, got {expected!r}"
        raise ValueError(msg)
    inner = satisfy(lambda unit: unit == expected, f"char({expected!r})", policy=policy)

    def run(inp: Input) -> Outcome[Unit]:
        _check_kind(inp, expected, "char")
        return inner.run(inp)

    return Parser(run, inner.name)


def one_of(
    members: Collection[Unit] | str | bytes, *, policy: StreamPolicy = DEFAULT_STREAM_POLICY
) -> Parser[Unit]:
    """Match one unit contained in members."""
    units, literal = _to_units(members)
    inner = satisfy(units.__contains__, f"one_of({members!r})", policy=policy)

    def run(inp: Input) -> Outcome[Unit]:
        if literal is not None:
            _check_kind(inp, literal, "one_of")
        return inner.run(inp)

    return Parser(run, inner.name)


def none_of(
    members: Collection[Unit] | str | bytes, *, policy: StreamPolicy = DEFAULT_STREAM_POLICY
) -> Parser[Unit]:
    """Match one unit NOT contained in members."""
    units, literal = _to_units(members)
    inner = satisfy(lambda unit: unit not in units, f"none_of({members!r})", policy=policy)

    def run(inp: Input) -> Outcome[Unit]:
        if literal is not None:
            _check_kind(inp, literal, "none_of")
        return inner.run(inp)

    return Parser(run, inner.name)


def line_ending(*, policy: StreamPolicy = DEFAULT_STREAM_POLICY) -> Parser[Input]:
    """Match LF or CRLF.

    Under STREAMING, empty input and a lone CR at the end of the input are
    Incomplete: the next unit decides whether it starts a CRLF. Under
    COMPLETE both are Failed(CHAR_MISMATCH).
    """

    def run(inp: Input) -> Outcome[Input]:
        streaming = policy is StreamPolicy.STREAMING
        if inp.is_empty:
            if streaming:
                return Incomplete(Needed.exact(1))
            return fail_at(ErrorKind.CHAR_MISMATCH, inp)
        first = inp.unit_at(0)
        if first == _as_unit(inp, "\n"):
            head, rest = inp.split_at(1)
            return Done(rest, head)
        if first != _as_unit(inp, "\r"):
            return fail_at(ErrorKind.CHAR_MISMATCH, inp)
        if len(inp) == 1:
            if streaming:
                return Incomplete(Needed.exact(1))
            return fail_at(ErrorKind.CHAR_MISMATCH, inp)
        if inp.unit_at(1) != _as_unit(inp, "\n"):
            return fail_at(ErrorKind.CHAR_MISMATCH, inp)
        head, rest = inp.split_at(2)
        return Done(rest, head)

    return Parser(run, f"line_ending[{policy}]")


def eof() -> Parser[Input]:
    """Succeed only on empty input; output is the empty view."""

    def run(inp: Input) -> Outcome[Input]:
        if not inp.is_empty:
            return fail_at(ErrorKind.EOF_EXPECTED, inp)
        return Done(inp, inp)

    return Parser(run, "eof")


# ============================================================================
# Character classes
# ============================================================================


def take_while1(
    predicate: Callable[[Unit], bool],
    *,
    policy: StreamPolicy = DEFAULT_STREAM_POLICY,
    name: str = "take_while1",
) -> Parser[Input]:
    """Consume the longest non-empty run of units accepted by predicate.

    End of input while still matching:
        STREAMING → Incomplete(Needed.exact(1)), the run may continue
        COMPLETE  → Done with the run

    Args:
        predicate: Unit test
        policy: End-of-input behavior
        name: Parser name for diagnostics

    Returns:
        Parser whose output is the zero-copy view of the run
    """

    def run(inp: Input) -> Outcome[Input]:
        count = 0
        size = len(inp)
        while count < size and predicate(inp.unit_at(count)):
            count += 1
        if count == size and policy is StreamPolicy.STREAMING:
            return Incomplete(Needed.exact(1))
        if count == 0:
            return fail_at(ErrorKind.PREDICATE_FAILED, inp)
        head, rest = inp.split_at(count)
        return Done(rest, head)

    return Parser(run, f"{name}[{policy}]")


def take_till1(
    predicate: Callable[[Unit], bool],
    *,
    policy: StreamPolicy = DEFAULT_STREAM_POLICY,
    name: str = "take_till1",
) -> Parser[Input]:
    """Consume the longest non-empty run of units rejected by predicate."""
    return take_while1(lambda unit: not predicate(unit), policy=policy, name=name)


_is_digit = _ascii_class(DIGITS)
_is_hex_digit = _ascii_class(HEX_DIGITS)
_is_oct_digit = _ascii_class(OCT_DIGITS)
_is_alpha = _ascii_class(ASCII_LETTERS)
_is_alphanumeric = _ascii_class(ASCII_LETTERS + DIGITS)
_is_space = _ascii_class(SPACE_CHARS)
_is_multispace = _ascii_class(MULTISPACE_CHARS)


def digit(*, policy: StreamPolicy = DEFAULT_STREAM_POLICY) -> Parser[Input]:
    """Run of ASCII digits 0-9."""
    return take_while1(_is_digit, policy=policy, name="digit")


def hex_digit(*, policy: StreamPolicy = DEFAULT_STREAM_POLICY) -> Parser[Input]:
    """Run of ASCII hexadecimal digits."""
    return take_while1(_is_hex_digit, policy=policy, name="hex_digit")


def oct_digit(*, policy: StreamPolicy = DEFAULT_STREAM_POLICY) -> Parser[Input]:
    return take_while1(_is_oct_digit, policy=policy, name="oct_digit")


def alpha(*, policy: StreamPolicy = DEFAULT_STREAM_POLICY) -> Parser[Input]:
    """Run of ASCII letters."""
    return take_while1(_is_alpha, policy=policy, name="alpha")


def alphanumeric(*, policy: StreamPolicy = DEFAULT_STREAM_POLICY) -> Parser[Input]:
    return take_while1(_is_alphanumeric, policy=policy, name="alphanumeric")


def space(*, policy: StreamPolicy = DEFAULT_STREAM_POLICY) -> Parser[Input]:
    """Run of spaces and tabs."""
    return take_while1(_is_space, policy=policy, name="space")


def multispace(*, policy: StreamPolicy = DEFAULT_STREAM_POLICY) -> Parser[Input]:
    """Run of spaces, tabs, carriage returns and line feeds."""
    return take_while1(_is_multispace, policy=policy, name="multispace")
