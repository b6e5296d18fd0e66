"""Error chains carried by Failed outcomes.

A failure starts as a single entry recorded by the primitive that rejected
the input. Each combinator the failure travels through may add one entry of
its own at the outer end. Entries are never removed or rewritten, so the
innermost cause is always available for diagnostics.

Python 3.13+.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field

from nomlite.enums import ErrorKind

__all__ = ["ErrorChain", "ErrorEntry", "ErrorKind"]


@dataclass(frozen=True, slots=True)
class ErrorEntry:
    """One (kind, position) link of an error chain.

    Attributes:
        kind: What went wrong
        position: Absolute offset into the backing buffer
        code: Caller-defined code, present only for ErrorKind.CUSTOM
        cause: Exception that triggered the entry (map_res), excluded from equality
    """

    kind: ErrorKind
    position: int
    code: int | None = None
    cause: BaseException | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        """Validate ErrorEntry invariants.

        Raises:
            ValueError: If position is negative, a CUSTOM entry has no code,
                or a non-CUSTOM entry carries one.
        """
        if self.position < 0:
            msg = f"ErrorEntry.position must be >= 0, got {self.position}"
            raise ValueError(msg)
        if self.kind is ErrorKind.CUSTOM and self.code is None:
            msg = "ErrorKind.CUSTOM entries require a code"
            raise ValueError(msg)
        if self.kind is not ErrorKind.CUSTOM and self.code is not None:
            msg = f"Only ErrorKind.CUSTOM entries carry a code, got {self.kind}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class ErrorChain:
    """Innermost-first sequence of error entries.

    Example:
        >>> chain = ErrorChain.single(ErrorKind.CHAR_MISMATCH, 3)
        >>> chain = chain.wrap(ErrorKind.ALTERNATIVES_EXHAUSTED, 0)
        >>> chain.kinds
        (<ErrorKind.CHAR_MISMATCH: 'char_mismatch'>, <ErrorKind.ALTERNATIVES_EXHAUSTED: ...>)
        >>> chain.innermost.position
        3
    """

    entries: tuple[ErrorEntry, ...]

    def __post_init__(self) -> None:
        if not self.entries:
            msg = "ErrorChain requires at least one entry"
            raise ValueError(msg)

    @classmethod
    def single(
        cls,
        kind: ErrorKind,
        position: int,
        code: int | None = None,
        cause: BaseException | None = None,
    ) -> "ErrorChain":
        """Start a chain at the failing primitive."""
        return cls((ErrorEntry(kind, position, code, cause),))

    def wrap(
        self,
        kind: ErrorKind,
        position: int,
        code: int | None = None,
        cause: BaseException | None = None,
    ) -> "ErrorChain":
        """Return a new chain with an outer entry added; self is unchanged."""
        return ErrorChain((*self.entries, ErrorEntry(kind, position, code, cause)))

    @property
    def innermost(self) -> ErrorEntry:
        """Root cause: the entry recorded by the primitive that failed."""
        return self.entries[0]

    @property
    def outermost(self) -> ErrorEntry:
        """Most recent context entry."""
        return self.entries[-1]

    @property
    def kinds(self) -> tuple[ErrorKind, ...]:
        return tuple(entry.kind for entry in self.entries)

    def __iter__(self) -> Iterator[ErrorEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)
