import os
from dataclasses import dataclass, field


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").lower() in {"1", "true", "yes"}


@dataclass
class HuffmanConfig:
    """
    Configuration for building Huffman trees.

    Frequency counts are 128-bit unsigned values unless `count_bits` is
    passed explicitly. HUFFMAN_DEBUG in the environment turns on build
    summaries on stderr.
    """
    count_bits: int = 128
    debug: bool = field(default_factory=lambda: _env_flag("HUFFMAN_DEBUG"))

    def __post_init__(self):
        if self.count_bits <= 0:
            raise ValueError("count_bits must be positive")

    @property
    def max_count(self) -> int:
        return (1 << self.count_bits) - 1
