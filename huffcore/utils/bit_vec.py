"""
Growable bit sequence packed into a bytearray.

Bits are stored least-significant-bit first inside each byte, in push order.
`_bit` counts the occupied bits of the last byte; 8 means the last byte is
full (or there is none) and the next push starts a new byte.
"""
from typing import Iterable, Iterator, Tuple

BITS = 8


class BitVec:
    __slots__ = "_bit", "_data", "_capacity"

    def __init__(self, capacity: int = 0):
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._bit = BITS
        self._data = bytearray()
        # bytearray has no reserve(); the hint is only reported back.
        self._capacity = (capacity + BITS - 1) // BITS

    @classmethod
    def with_capacity(cls, capacity: int) -> "BitVec":
        """Empty sequence sized for at least `capacity` bits."""
        return cls(capacity)

    @classmethod
    def from_bits(cls, bits: Iterable) -> "BitVec":
        bits = list(bits)
        v = cls(len(bits))
        for bit in bits:
            v.push(bit)
        return v

    @classmethod
    def from_bytes(cls, data: bytes, bit_length: int) -> "BitVec":
        """
        Rebuild a sequence from `into_bytes()` output and its recorded length.

        Bits of the last byte past `bit_length` are padding and get cleared.
        """
        if bit_length < 0:
            raise ValueError("bit_length must be non-negative")
        expected = (bit_length + BITS - 1) // BITS
        if len(data) != expected:
            raise ValueError(
                f"{bit_length} bits need {expected} bytes, got {len(data)}"
            )
        v = cls(bit_length)
        v._data = bytearray(data)
        tail = bit_length % BITS
        if tail:
            v._data[-1] &= (1 << tail) - 1
            v._bit = tail
        return v

    def capacity(self) -> int:
        """Bits the sequence holds before growing past its hint (multiple of 8)."""
        return max(self._capacity, len(self._data)) * BITS

    def __len__(self) -> int:
        return len(self._data) * BITS + self._bit - BITS

    def push(self, value) -> None:
        if self._bit == BITS:
            self._data.append(0)
            self._bit = 0
        if value:
            self._data[-1] |= 1 << self._bit
        self._bit += 1

    def extend(self, bits: Iterable) -> None:
        for bit in bits:
            self.push(bit)

    def iter(self) -> Iterator[bool]:
        data = self._data
        for pos in range(len(self)):
            yield (data[pos >> 3] >> (pos & 7)) & 1 == 1

    def __iter__(self) -> Iterator[bool]:
        return self.iter()

    def split_rest(self) -> Tuple["BitVec", "BitVec"]:
        """
        Split into a byte-aligned prefix and the trailing partial byte.

        The prefix is this sequence itself (its partial byte removed); the
        remainder holds fewer than 8 bits. Reading the prefix and then the
        remainder yields the original bits in order.
        """
        if self._bit == BITS:
            return self, BitVec()
        last = BitVec.with_capacity(BITS)
        b = self._data.pop()
        for i in range(self._bit):
            last.push((b >> i) & 1)
        self._bit = BITS
        return self, last

    def into_bytes(self) -> bytes:
        return bytes(self._data)

    def copy(self) -> "BitVec":
        v = BitVec(self.capacity())
        v._data = bytearray(self._data)
        v._bit = self._bit
        return v

    def __eq__(self, other):
        if not isinstance(other, BitVec):
            return NotImplemented
        return self._bit == other._bit and self._data == other._data

    __hash__ = None

    def __repr__(self):
        return "BitVec('%s')" % "".join("1" if b else "0" for b in self)
