from typing import Iterable, Optional

from huffcore.utils.bit_vec import BitVec


def bitvec_to_bitstring(bits: Iterable) -> str:
    """Convert a BitVec (or any bit iterable) -> bitstring such as '0110'."""
    return "".join("1" if bit else "0" for bit in bits)


def bitstring_to_bitvec(bits: str) -> BitVec:
    """Convert bitstring -> BitVec, first character pushed first."""
    if not set(bits).issubset({"0", "1"}):
        raise ValueError("bitstring_to_bitvec expects a bitstring containing only '0' and '1'.")
    return BitVec.from_bits(ch == "1" for ch in bits)


def bytes_to_bitstring(data: bytes, bit_length: Optional[int] = None) -> str:
    """
    Convert packed bytes -> bitstring, least-significant bit of each byte first.

    This is the layout `BitVec.into_bytes()` produces; pass the recorded
    `bit_length` to drop the padding of the last byte.
    """
    bits = "".join(f"{byte:08b}"[::-1] for byte in data)
    if bit_length is None:
        return bits
    if bit_length > len(bits):
        raise ValueError(
            f"bit_length {bit_length} exceeds the {len(bits)} bits available"
        )
    return bits[:bit_length]


def bitstring_to_bytes(bits: str) -> bytes:
    """
    Convert bitstring -> packed bytes (LSB first).

    Any length is accepted; the last byte is zero-padded.
    """
    return bitstring_to_bitvec(bits).into_bytes()
