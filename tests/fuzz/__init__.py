"""Fuzz testing for nomlite.

This package contains intensive property tests excluded from normal runs:
- test_streaming_property: chunked input gives the same decisions as the whole buffer

Run with: pytest -m fuzz

Python 3.13+.
"""
