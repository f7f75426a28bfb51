"""Bit-level helpers shared across the coding components."""

from huffcore.utils.bit_vec import BitVec
from huffcore.utils.bits_bytes_utils import (
    bitstring_to_bitvec,
    bitstring_to_bytes,
    bitvec_to_bitstring,
    bytes_to_bitstring,
)

__all__ = [
    "BitVec",
    "bitstring_to_bitvec",
    "bitstring_to_bytes",
    "bitvec_to_bitstring",
    "bytes_to_bitstring",
]
