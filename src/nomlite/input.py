"""Immutable input views for zero-copy parsing.

Implements the immutable view pattern: every parser receives an Input and
hands back a narrower Input over the SAME backing buffer.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Input is immutable (frozen dataclass)
    - A view is (data, offset, length); slicing never copies the buffer
    - Empty input is a state (is_empty), not a return value
    - Every advance() returns NEW Input (prevents infinite loops)
    - Materializing units into a str/bytes is explicit (fragment)

Buffer Types:
    - str: units are characters
    - bytes, bytearray, memoryview: units are bytes

    A unit is always handed out as a length-1 str or bytes so it compares
    directly against literals and works with ``in`` against character sets.

Ownership:
    The backing buffer belongs to the caller. Views derived from it are
    borrows: a streaming caller may only grow its buffer by appending and must
    re-wrap it in a new Input before retrying a parse.

Pattern Reference:
    - Rust nom parser combinator library (&[u8] / &str slices)
    - Haskell Parsec
"""

from collections.abc import Iterator
from dataclasses import dataclass

__all__ = ["Buffer", "Input", "Unit"]

type Buffer = str | bytes | bytearray | memoryview
type Unit = str | bytes


@dataclass(frozen=True, slots=True, eq=False)
class Input:
    """Immutable, zero-copy view over a caller-owned buffer.

    Key Design Decisions:
        1. Frozen dataclass - Immutability enforced by Python
        2. Slots - Memory efficiency (one view per parser step)
        3. Offsets are absolute - Error positions need no translation
        4. Equality is by content - Views compare against str/bytes literals

    Example:
        >>> text = Input("hello")
        >>> rest = text.advance(2)
        >>> rest.fragment
        'llo'
        >>> rest.offset
        2
        >>> rest.data is text.data  # Same backing buffer
        True
        >>> text.fragment  # Original unchanged (immutability)
        'hello'
    """

    data: Buffer
    offset: int = 0
    length: int | None = None

    def __post_init__(self) -> None:
        """Fill in the default length and check the view stays in bounds.

        Raises:
            TypeError: If data is not a str or bytes-like buffer
            ValueError: If offset or length fall outside the buffer
        """
        if not isinstance(self.data, (str, bytes, bytearray, memoryview)):
            msg = f"Input buffer must be str or bytes-like, got {type(self.data).__name__}"
            raise TypeError(msg)
        size = len(self.data)
        if self.offset < 0 or self.offset > size:
            msg = f"Input.offset must be within 0..{size}, got {self.offset}"
            raise ValueError(msg)
        if self.length is None:
            object.__setattr__(self, "length", size - self.offset)
        elif self.length < 0 or self.offset + self.length > size:
            msg = (
                f"Input view [{self.offset}, {self.offset + self.length}) "
                f"exceeds buffer of length {size}"
            )
            raise ValueError(msg)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self.length  # type: ignore[return-value]

    @property
    def end(self) -> int:
        """Absolute offset one past the last unit of the view."""
        return self.offset + len(self)

    @property
    def is_empty(self) -> bool:
        """Check if the view holds no units.

        Note: This is the preferred way to check for end of input.
              Use this in while loops: `while not view.is_empty:`
        """
        return len(self) == 0

    @property
    def is_text(self) -> bool:
        """True for str buffers, False for bytes-like buffers."""
        return isinstance(self.data, str)

    @property
    def fragment(self) -> Buffer:
        """Copy the viewed units out of the backing buffer.

        This is the only copying operation on Input. Parsers never call it;
        callers use it when they need a standalone str/bytes value.
        """
        return self.data[self.offset : self.end]

    def unit_at(self, index: int) -> Unit:
        """Get the unit at a position relative to the view start.

        Args:
            index: Relative index, 0 <= index < len(self)

        Returns:
            Length-1 str for text, length-1 bytes for binary buffers

        Raises:
            IndexError: If index is outside the view
        """
        if index < 0 or index >= len(self):
            msg = f"Unit index {index} outside view of length {len(self)}"
            raise IndexError(msg)
        pos = self.offset + index
        unit = self.data[pos : pos + 1]
        if isinstance(unit, (bytearray, memoryview)):
            return bytes(unit)
        return unit

    def units(self) -> Iterator[Unit]:
        """Iterate over the units of the view, first to last."""
        for index in range(len(self)):
            yield self.unit_at(index)

    def same_kind(self, literal: Buffer) -> bool:
        """Check that a literal can be compared against this buffer."""
        return isinstance(literal, str) == self.is_text

    def common_prefix_length(self, literal: Buffer) -> int:
        """Count leading units shared by the view and literal.

        Stops at the shorter of the two. No slice of the backing buffer is
        taken.
        """
        limit = min(len(self), len(literal))
        count = 0
        data = self.data
        base = self.offset
        while count < limit and data[base + count] == literal[count]:
            count += 1
        return count

    def startswith(self, literal: Buffer) -> bool:
        """Check whether the view begins with literal, without copying."""
        if len(literal) > len(self):
            return False
        if isinstance(self.data, memoryview):
            return self.common_prefix_length(literal) == len(literal)
        return self.data.startswith(literal, self.offset, self.end)

    def find(self, literal: Buffer) -> int:
        """Find literal inside the view.

        Returns:
            Relative index of the first occurrence, or -1 if absent
        """
        if isinstance(self.data, memoryview):
            # memoryview has no find(); search a copy of the viewed span only
            return bytes(self.fragment).find(literal)
        found = self.data.find(literal, self.offset, self.end)
        return found - self.offset if found >= 0 else -1

    # ------------------------------------------------------------------
    # Derived views (all share self.data)
    # ------------------------------------------------------------------

    def advance(self, count: int) -> "Input":
        """Return new view with count units dropped from the front.

        Args:
            count: Number of units to skip, 0 <= count <= len(self)

        Returns:
            New Input over the same buffer (original unchanged)

        Example:
            >>> view = Input("hello")
            >>> view.advance(1).offset
            1
            >>> view.offset  # Original unchanged
            0
        """
        if count < 0 or count > len(self):
            msg = f"Cannot advance by {count} in view of length {len(self)}"
            raise ValueError(msg)
        return Input(self.data, self.offset + count, len(self) - count)

    def split_at(self, count: int) -> tuple["Input", "Input"]:
        """Split into (first count units, the rest). Both are views."""
        head = self.slice(0, count)
        return head, self.advance(count)

    def slice(self, start: int, stop: int | None = None) -> "Input":
        """Return the sub-view [start, stop) relative to this view."""
        stop = len(self) if stop is None else stop
        if start < 0 or stop < start or stop > len(self):
            msg = f"Slice [{start}, {stop}) outside view of length {len(self)}"
            raise ValueError(msg)
        return Input(self.data, self.offset + start, stop - start)

    def consumed_until(self, remaining: "Input") -> "Input":
        """View of the units between this view's start and remaining's start.

        Used by recognize() to hand back exactly what a parser consumed.

        Raises:
            ValueError: If remaining is not a suffix view of this one
        """
        if remaining.data is not self.data or not (
            self.offset <= remaining.offset and remaining.end == self.end
        ):
            msg = "remaining is not a suffix of this input"
            raise ValueError(msg)
        return Input(self.data, self.offset, remaining.offset - self.offset)

    # ------------------------------------------------------------------
    # Content comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Input):
            if self.is_text != other.is_text or len(self) != len(other):
                return False
            return self.fragment == other.fragment
        if isinstance(other, str):
            return self.is_text and self.fragment == other
        if isinstance(other, (bytes, bytearray, memoryview)):
            return not self.is_text and bytes(self.fragment) == bytes(other)
        return NotImplemented

    def __hash__(self) -> int:
        fragment = self.fragment
        if isinstance(fragment, (bytearray, memoryview)):
            fragment = bytes(fragment)
        return hash(fragment)

    def __repr__(self) -> str:
        fragment = self.fragment
        if isinstance(fragment, (bytearray, memoryview)):
            fragment = bytes(fragment)
        return f"Input({fragment!r}, offset={self.offset})"
