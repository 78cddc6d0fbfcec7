"""Test helpers module for shared test utilities.

- encoders: operand encoders and all-combinations iterators
"""

from tests.helpers.encoders import ENCODER_NAMES, ENCODERS, encode_all, pairs, triples

__all__ = [
    "ENCODERS",
    "ENCODER_NAMES",
    "encode_all",
    "pairs",
    "triples",
]
