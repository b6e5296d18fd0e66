"""Fixed-width integer parsers for binary formats.

Each parser is take(width) followed by int.from_bytes, so it inherits take()'s
contract: Done when width bytes are available, Incomplete(exact) otherwise,
never Failed.
"""

from typing import Literal

from nomlite.input import Input
from nomlite.outcome import Done, Outcome, Parser
from nomlite.primitives import take

__all__ = [
    "be_i16",
    "be_i32",
    "be_u8",
    "be_u16",
    "be_u32",
    "be_u64",
    "le_i16",
    "le_i32",
    "le_u16",
    "le_u32",
    "le_u64",
]


def _integer(width: int, byteorder: Literal["big", "little"], signed: bool, name: str) -> Parser[int]:
    raw = take(width)

    def run(inp: Input) -> Outcome[int]:
        if inp.is_text:
            msg = f"{name}: binary number parser applied to text input"
            raise TypeError(msg)
        outcome = raw.run(inp)
        if isinstance(outcome, Done):
            value = int.from_bytes(bytes(outcome.output.fragment), byteorder, signed=signed)
            return Done(outcome.remaining, value)
        return outcome

    return Parser(run, name)


be_u8 = _integer(1, "big", signed=False, name="be_u8")
be_u16 = _integer(2, "big", signed=False, name="be_u16")
be_u32 = _integer(4, "big", signed=False, name="be_u32")
be_u64 = _integer(8, "big", signed=False, name="be_u64")
be_i16 = _integer(2, "big", signed=True, name="be_i16")
be_i32 = _integer(4, "big", signed=True, name="be_i32")

le_u16 = _integer(2, "little", signed=False, name="le_u16")
le_u32 = _integer(4, "little", signed=False, name="le_u32")
le_u64 = _integer(8, "little", signed=False, name="le_u64")
le_i16 = _integer(2, "little", signed=True, name="le_i16")
le_i32 = _integer(4, "little", signed=True, name="le_i32")
