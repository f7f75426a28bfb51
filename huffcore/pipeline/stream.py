from typing import Iterable, List, Optional

from huffcore.encoding_schemes.huffman import HuffmanDecoder, HuffmanEncoder
from huffcore.utils.bit_vec import BitVec


def count_frequencies(symbols: Iterable[int], alphabet_size: int) -> List[int]:
    """
    Build a frequency table for symbol ids in `0..alphabet_size-1`.

    """
    if alphabet_size < 2:
        raise ValueError("alphabet_size must be at least 2.")
    counts = [0] * alphabet_size
    for s in symbols:
        if not 0 <= s < alphabet_size:
            raise ValueError(f"Symbol {s} outside alphabet of size {alphabet_size}.")
        counts[s] += 1
    return counts


def encode_symbols(
    encoder: HuffmanEncoder,
    symbols: Iterable[int],
    out: Optional[BitVec] = None,
) -> BitVec:
    """
    Append the codeword of every symbol to `out` (a fresh BitVec by default).

    The caller keeps `len(out)` next to `out.into_bytes()` to decode later.
    """
    if out is None:
        out = BitVec()
    for s in symbols:
        out.extend(encoder.bits(s))
    return out


def decode_symbols(decoder: HuffmanDecoder, bits: Iterable, count: int) -> List[int]:
    """
    Decode exactly `count` symbols from a back-to-back codeword stream.

    Bits after the last codeword (e.g. byte padding) are left unread.
    """
    it = iter(bits)
    return [decoder.decode(it) for _ in range(count)]
