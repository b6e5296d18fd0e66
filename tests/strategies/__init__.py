"""Hypothesis strategies for nomlite property-based testing.

Strategies are organized by domain:

- parsing: Input buffers, literals, split points and small grammars

Usage:
    from tests.strategies import ascii_text, literals, split_points

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - buffers_any_kind (buffer_kind=text|bytes|bytearray|memoryview)
    - chunked_texts (chunk_count=1|2-3|4+)
    - literal_prefix_cases (tag_case=full|partial|mismatch)
"""

from .parsing import (
    SMALL_ALPHABET,
    ascii_text,
    buffers_any_kind,
    chunked_texts,
    literal_prefix_cases,
    literals,
    split_points,
)

__all__ = [
    "SMALL_ALPHABET",
    "ascii_text",
    "buffers_any_kind",
    "chunked_texts",
    "literal_prefix_cases",
    "literals",
    "split_points",
]
