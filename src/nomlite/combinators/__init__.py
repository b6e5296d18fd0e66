"""Combinators: parsers built from other parsers.

Module Organization:
- sequence.py: sequence()/bind()/discard() and tuple-style helpers
- branch.py: alt()
- multi.py: many0, many1, many_m_n, many_till and friends
- transform.py: opt, cond_reduce, map_, map_res and friends
"""

from .branch import alt
from .multi import (
    count,
    fold_many0,
    fold_many1,
    many0,
    many1,
    many_m_n,
    many_till,
    separated_list0,
    separated_list1,
)
from .sequence import (
    Step,
    bind,
    delimited,
    discard,
    pair,
    preceded,
    separated_pair,
    sequence,
    terminated,
    tuple_,
)
from .transform import (
    cond,
    cond_reduce,
    context,
    lazy,
    map_,
    map_res,
    not_,
    opt,
    peek,
    recognize,
    value,
    verify,
)

__all__ = [
    "Step",
    "alt",
    "bind",
    "cond",
    "cond_reduce",
    "context",
    "count",
    "delimited",
    "discard",
    "fold_many0",
    "fold_many1",
    "lazy",
    "many0",
    "many1",
    "many_m_n",
    "many_till",
    "map_",
    "map_res",
    "not_",
    "opt",
    "pair",
    "peek",
    "preceded",
    "recognize",
    "separated_list0",
    "separated_list1",
    "separated_pair",
    "sequence",
    "terminated",
    "tuple_",
    "value",
    "verify",
]
