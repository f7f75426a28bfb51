from huffcore.encoding_schemes.huffman import (
    HuffmanDecoder,
    HuffmanEncoder,
    HuffmanTree,
    Jump,
    Node,
    Value,
)

__all__ = [
    "HuffmanDecoder",
    "HuffmanEncoder",
    "HuffmanTree",
    "Jump",
    "Node",
    "Value",
]
