"""Enumerations for nomlite type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class StreamPolicy(StrEnum):
    """What an unbounded run does when it reaches the end of the input.

    StrEnum provides automatic string conversion: str(StreamPolicy.COMPLETE) == "complete"
    """

    STREAMING = "streaming"
    """More data may follow: a run touching the end reports Incomplete."""

    COMPLETE = "complete"
    """The input is final: a run touching the end terminates with Done."""


class ErrorKind(StrEnum):
    """Kind of a single entry in an error chain.

    The set is closed; CUSTOM plus an integer code is the escape hatch for
    caller-defined failures.
    """

    LITERAL_MISMATCH = "literal_mismatch"
    """tag() prefix did not match."""

    CHAR_MISMATCH = "char_mismatch"
    """char(), one_of() or none_of() rejected the first unit."""

    PREDICATE_FAILED = "predicate_failed"
    """Character class matched an empty run."""

    ALTERNATIVES_EXHAUSTED = "alternatives_exhausted"
    """Every alt() candidate failed."""

    CONDITION_FAILED = "condition_failed"
    """cond_reduce() condition was false."""

    CUSTOM = "custom"
    """Caller-defined failure, carries an integer code."""

    SEQUENCE = "sequence"
    """A sequence step failed; position is the sequence start."""

    REPETITION = "repetition"
    """A repetition ended with too few matches."""

    VERIFY_FAILED = "verify_failed"
    """verify() predicate rejected a parsed value."""

    EOF_EXPECTED = "eof_expected"
    """eof found unconsumed input."""

    NOT_EXPECTED = "not_expected"
    """not_() child parser matched."""


__all__ = [
    "ErrorKind",
    "StreamPolicy",
]
