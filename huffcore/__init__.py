"""Static Huffman coding with a bit-packed sequence type."""

from huffcore.config import HuffmanConfig
from huffcore.encoding_schemes.huffman import HuffmanDecoder, HuffmanEncoder, HuffmanTree
from huffcore.pipeline.stream import count_frequencies, decode_symbols, encode_symbols
from huffcore.utils.bit_vec import BitVec

__all__ = [
    "BitVec",
    "HuffmanConfig",
    "HuffmanDecoder",
    "HuffmanEncoder",
    "HuffmanTree",
    "count_frequencies",
    "decode_symbols",
    "encode_symbols",
]
