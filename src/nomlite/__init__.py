"""nomlite - streaming parser combinators over zero-copy input views.

Small primitives (tag, take, char, character classes) are composed with
combinators (alt, many0, sequence, opt, map_res, ...) into parsers for
structured text and binary formats. The same parser runs over a complete
buffer or over a growing stream: when input runs out before a decision can be
made it answers Incomplete and the caller retries with more data.

Public API:
    Input - Immutable view over a caller-owned str/bytes buffer
    Parser - Pure parser object, invoked with parser.parse(input)
    Done, Failed, Incomplete, Needed - The three-way outcome protocol
    ErrorChain, ErrorEntry, ErrorKind - Innermost-first failure chains
    StreamPolicy - End-of-input behavior of character classes

Exceptions:
    CombinatorError - Base exception class
    ParseFailedError, IncompleteInputError, TrailingInputError - Raised by runner helpers
    InfiniteLoopError - Repetition over a parser that consumed nothing

Submodules:
    nomlite.primitives - tag, take, char, one_of, none_of, character classes
    nomlite.binary - Fixed-width integers (be_u16, le_u32, ...)
    nomlite.combinators - Sequencing, alternation, repetition, transformation
    nomlite.runner - finish, parse_complete, trace
"""

from . import binary
from .combinators import (
    Step,
    alt,
    bind,
    cond,
    cond_reduce,
    context,
    count,
    delimited,
    discard,
    fold_many0,
    fold_many1,
    lazy,
    many0,
    many1,
    many_m_n,
    many_till,
    map_,
    map_res,
    not_,
    opt,
    pair,
    peek,
    preceded,
    recognize,
    separated_list0,
    separated_list1,
    separated_pair,
    sequence,
    terminated,
    tuple_,
    value,
    verify,
)
from .diagnostics import (
    CombinatorError,
    IncompleteInputError,
    InfiniteLoopError,
    ParseFailedError,
    TrailingInputError,
)
from .enums import ErrorKind, StreamPolicy
from .errors import ErrorChain, ErrorEntry
from .input import Input
from .outcome import Done, Failed, Incomplete, Needed, Outcome, Parser
from .primitives import (
    alpha,
    alphanumeric,
    char,
    digit,
    eof,
    hex_digit,
    line_ending,
    multispace,
    none_of,
    oct_digit,
    one_of,
    satisfy,
    space,
    tag,
    tag_no_case,
    take,
    take_till1,
    take_until,
    take_while1,
)
from .runner import finish, parse_complete, trace

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("nomlite")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CombinatorError",
    "Done",
    "ErrorChain",
    "ErrorEntry",
    "ErrorKind",
    "Failed",
    "Incomplete",
    "IncompleteInputError",
    "InfiniteLoopError",
    "Input",
    "Needed",
    "Outcome",
    "ParseFailedError",
    "Parser",
    "Step",
    "StreamPolicy",
    "TrailingInputError",
    "__version__",
    "alpha",
    "alphanumeric",
    "alt",
    "binary",
    "bind",
    "char",
    "cond",
    "cond_reduce",
    "context",
    "count",
    "delimited",
    "digit",
    "discard",
    "eof",
    "finish",
    "fold_many0",
    "fold_many1",
    "hex_digit",
    "lazy",
    "line_ending",
    "many0",
    "many1",
    "many_m_n",
    "many_till",
    "map_",
    "map_res",
    "multispace",
    "none_of",
    "not_",
    "oct_digit",
    "one_of",
    "opt",
    "pair",
    "parse_complete",
    "peek",
    "preceded",
    "recognize",
    "satisfy",
    "separated_list0",
    "separated_list1",
    "separated_pair",
    "sequence",
    "space",
    "tag",
    "tag_no_case",
    "take",
    "take_till1",
    "take_until",
    "take_while1",
    "terminated",
    "trace",
    "tuple_",
    "value",
    "verify",
]
