"""
Static Huffman coding over integer symbol ids.

A HuffmanTree is built once from a frequency table; an encoder (symbol ->
codeword) and a decoder (flattened preorder trie) are derived from it.
Descending to the left child emits a 1 bit, descending right emits a 0 bit.
"""

import heapq
import operator
import sys
from dataclasses import dataclass
from itertools import count as _counter
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from huffcore.config import HuffmanConfig
from huffcore.utils.bit_vec import BitVec
from huffcore.utils.bits_bytes_utils import bitvec_to_bitstring


def _dbg(cfg: HuffmanConfig, msg: str) -> None:
    if cfg.debug:
        print(f"[HUFF] {msg}", file=sys.stderr)


@dataclass
class Node:
    """
    Huffman tree node.

    Leaves carry a symbol id and no children; internal nodes carry no symbol
    and exactly two children whose counts add up to `count`.
    """
    count: int
    symbol: Optional[int] = None
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    @property
    def is_leaf(self) -> bool:
        return self.symbol is not None

    def make_encoder(self, codes: List[Tuple[bool, ...]], current: List[bool]) -> None:
        if self.is_leaf:
            codes[self.symbol] = tuple(current)
            return
        current.append(True)
        self.left.make_encoder(codes, current)
        current.pop()
        current.append(False)
        self.right.make_encoder(codes, current)
        current.pop()

    def make_decoder(self, nodes: List["DecoderNode"]) -> None:
        if self.is_leaf:
            nodes.append(Value(self.symbol))
            return
        idx = len(nodes)
        nodes.append(Jump(0))
        self.left.make_decoder(nodes)
        # right subtree starts right after the whole left subtree
        nodes[idx] = Jump(len(nodes))
        self.right.make_decoder(nodes)

    def make_lengths(self, lengths: List[int], depth: int) -> None:
        if self.is_leaf:
            lengths[self.symbol] = depth
            return
        self.left.make_lengths(lengths, depth + 1)
        self.right.make_lengths(lengths, depth + 1)


def _check_counts(counts: Sequence[int], cfg: HuffmanConfig) -> List[int]:
    """Validate a frequency table and return it as plain ints."""
    if len(counts) < 2:
        raise ValueError(
            f"Huffman coding needs at least 2 symbols, got {len(counts)}"
        )
    checked = []
    for symbol, c in enumerate(counts):
        if isinstance(c, bool):
            raise ValueError(f"Count for symbol {symbol} is not an integer: {c!r}")
        try:
            c = operator.index(c)
        except TypeError:
            raise ValueError(f"Count for symbol {symbol} is not an integer: {c!r}") from None
        if c < 0:
            raise ValueError(f"Count for symbol {symbol} is negative: {c}")
        if c > cfg.max_count:
            raise ValueError(
                f"Count for symbol {symbol} does not fit in {cfg.count_bits} bits"
            )
        checked.append(c)
    return checked


class HuffmanTree:
    """
    Optimal prefix-code tree for a frequency table indexed by symbol id.

    The two lowest counts are merged repeatedly using a binary heap. Equal
    counts are resolved by insertion order: leaves in symbol-id order first,
    then merged nodes in the order they were created. The first node popped
    becomes the left child.
    """

    def __init__(self, counts: Sequence[int], cfg: Optional[HuffmanConfig] = None):
        cfg = cfg or HuffmanConfig()
        counts = _check_counts(list(counts), cfg)

        order = _counter()
        heap: List[Tuple[int, int, Node]] = [
            (c, next(order), Node(count=c, symbol=symbol))
            for symbol, c in enumerate(counts)
        ]
        heapq.heapify(heap)
        while len(heap) > 1:
            _, _, left = heapq.heappop(heap)
            _, _, right = heapq.heappop(heap)
            merged = Node(count=left.count + right.count, left=left, right=right)
            heapq.heappush(heap, (merged.count, next(order), merged))

        self.elements = len(counts)
        self.root: Node = heap[0][2]
        self.cfg = cfg
        _dbg(cfg, f"tree built: symbols={self.elements} total={self.root.count}")

    @classmethod
    def from_data(cls, data: bytes, cfg: Optional[HuffmanConfig] = None) -> "HuffmanTree":
        """Tree over the 256 byte values, counted from `data`."""
        counts = [0] * 256
        for byte in data:
            counts[byte] += 1
        return cls(counts, cfg)

    def __len__(self) -> int:
        return self.elements

    @property
    def total(self) -> int:
        return self.root.count

    def code_lengths(self) -> List[int]:
        lengths = [0] * self.elements
        self.root.make_lengths(lengths, 0)
        return lengths

    def encoder(self) -> "HuffmanEncoder":
        codes: List[Tuple[bool, ...]] = [()] * self.elements
        self.root.make_encoder(codes, [])
        _dbg(self.cfg, f"encoder: longest codeword={max(len(c) for c in codes)} bits")
        return HuffmanEncoder(tuple(codes))

    def decoder(self) -> "HuffmanDecoder":
        nodes: List[DecoderNode] = []
        self.root.make_decoder(nodes)
        _dbg(self.cfg, f"decoder: {len(nodes)} slots")
        return HuffmanDecoder(tuple(nodes))


class HuffmanEncoder:
    """
    Symbol id -> codeword lookup derived from a HuffmanTree.

    Codewords are kept as tuples of bools so the table cannot be changed
    through anything the encoder hands out.
    """

    def __init__(self, codes: Tuple[Tuple[bool, ...], ...]):
        self._codes = codes

    def __len__(self) -> int:
        return len(self._codes)

    def encode(self, symbol: int) -> BitVec:
        """Return a new BitVec holding the codeword for `symbol`."""
        return BitVec.from_bits(self.bits(symbol))

    def bits(self, symbol: int) -> Tuple[bool, ...]:
        if not 0 <= symbol < len(self._codes):
            raise IndexError(
                f"Symbol {symbol} out of range for alphabet of {len(self._codes)}"
            )
        return self._codes[symbol]

    def code_table(self) -> Dict[int, str]:
        return {symbol: bitvec_to_bitstring(code) for symbol, code in enumerate(self._codes)}


@dataclass(frozen=True)
class Jump:
    """Internal trie slot: left child is the next slot, right child is `right`."""
    right: int


@dataclass(frozen=True)
class Value:
    """Leaf trie slot."""
    symbol: int


DecoderNode = Union[Jump, Value]


class HuffmanDecoder:
    """
    Flattened preorder trie for bit-by-bit decoding.

    Slot 0 is the root. Decoding follows jumps until a value slot is hit,
    reading exactly one bit per jump.
    """

    def __init__(self, nodes: Tuple[DecoderNode, ...]):
        self.nodes = nodes

    def __len__(self) -> int:
        return len(self.nodes)

    def decode(self, bits: Iterable) -> int:
        """
        Decode one symbol from `bits`.

        Pass an iterator to decode a concatenated stream with repeated calls;
        each call consumes exactly one codeword. Raises ValueError when the
        bits run out before a symbol is reached.
        """
        it = iter(bits)
        nodes = self.nodes
        idx = 0
        node = nodes[0]
        while isinstance(node, Jump):
            bit = next(it, None)
            if bit is None:
                raise ValueError("Bit source exhausted before a symbol was decoded")
            idx = idx + 1 if bit else node.right
            node = nodes[idx]
        return node.symbol
