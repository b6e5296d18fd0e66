"""Three-way parse outcome protocol.

Every parser returns exactly one of:

    Done(remaining, output)  - a prefix matched; remaining is the suffix view
    Failed(error)            - no match here; try something else
    Incomplete(needed)       - cannot decide yet; retry with more input

Failed and Incomplete are different recovery paths. A combinator that turns
one into the other breaks streaming callers.

Pattern:
    Every parser has signature:
        def run(input: Input) -> Outcome[T]:
            ...
            return Done(input.advance(n), value)

Python 3.13+.
"""

from collections.abc import Callable
from dataclasses import dataclass

from nomlite.enums import ErrorKind
from nomlite.errors import ErrorChain
from nomlite.input import Buffer, Input

__all__ = [
    "Done",
    "Failed",
    "Incomplete",
    "Needed",
    "Outcome",
    "Parser",
    "fail_at",
]


@dataclass(frozen=True, slots=True)
class Needed:
    """How much more input a parser needs to make progress.

    Attributes:
        size: Exact number of additional units, or None if unknown

    Example:
        >>> Needed.exact(3).size
        3
        >>> Needed.unknown().is_known
        False
    """

    size: int | None

    def __post_init__(self) -> None:
        if self.size is not None and self.size < 1:
            msg = f"Needed.size must be >= 1 or None, got {self.size}"
            raise ValueError(msg)

    @classmethod
    def exact(cls, size: int) -> "Needed":
        return cls(size)

    @classmethod
    def unknown(cls) -> "Needed":
        return cls(None)

    @property
    def is_known(self) -> bool:
        return self.size is not None


@dataclass(frozen=True, slots=True)
class Done[T]:
    """Successful parse.

    Attributes:
        remaining: Unconsumed suffix, a view over the input's buffer
        output: Value produced by the parser
    """

    remaining: Input
    output: T


@dataclass(frozen=True, slots=True)
class Failed:
    """Recoverable mismatch at the current position.

    Attributes:
        error: Innermost-first chain describing the failure
    """

    error: ErrorChain

    @property
    def kind(self) -> ErrorKind:
        """Outermost kind, the context closest to the caller."""
        return self.error.outermost.kind

    def wrap(self, kind: ErrorKind, position: int, code: int | None = None) -> "Failed":
        """Same failure with one more context entry."""
        return Failed(self.error.wrap(kind, position, code))


@dataclass(frozen=True, slots=True)
class Incomplete:
    """Not enough input to decide.

    Attributes:
        needed: Additional input required before retrying
    """

    needed: Needed


type Outcome[T] = Done[T] | Failed | Incomplete


def fail_at(kind: ErrorKind, at: Input, code: int | None = None) -> Failed:
    """Build a single-entry Failed anchored at the start of a view."""
    return Failed(ErrorChain.single(kind, at.offset, code))


@dataclass(frozen=True, slots=True)
class Parser[T]:
    """A pure parsing function plus a name for diagnostics.

    Parsers hold no mutable state: the same Parser may be invoked from any
    number of threads on different inputs.

    Attributes:
        run: Function from Input to Outcome
        name: Short description used in repr and trace logs

    Example:
        >>> from nomlite import tag
        >>> outcome = tag("ab").parse("abc")
        >>> outcome.remaining.fragment
        'c'
    """

    run: Callable[[Input], Outcome[T]]
    name: str = "parser"

    def parse(self, source: Input | Buffer) -> Outcome[T]:
        """Run the parser.

        Args:
            source: An Input view, or a raw buffer wrapped as a full view

        Returns:
            Done, Failed or Incomplete
        """
        if not isinstance(source, Input):
            source = Input(source)
        return self.run(source)

    def __repr__(self) -> str:
        return f"<Parser {self.name}>"
