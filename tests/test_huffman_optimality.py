import itertools
import random

from dahuffman import HuffmanCodec

from huffcore.encoding_schemes.huffman import HuffmanTree


def _weighted_length(counts, lengths):
    return sum(c * n for c, n in zip(counts, lengths))


def _reference_lengths(counts):
    # eof=0 is already a symbol, so dahuffman does not add its own EOF entry
    frequencies = {symbol: c for symbol, c in enumerate(counts)}
    table = HuffmanCodec.from_frequencies(frequencies, eof=0).get_code_table()
    return [table[symbol][0] for symbol in range(len(counts))]


def _brute_force_best(counts):
    """Smallest weighted length over every length vector satisfying Kraft."""
    n = len(counts)
    max_len = n - 1
    best = None
    for lengths in itertools.product(range(1, max_len + 1), repeat=n):
        if sum(1 << (max_len - l) for l in lengths) > 1 << max_len:
            continue
        cost = _weighted_length(counts, lengths)
        if best is None or cost < best:
            best = cost
    return best


def test_random_tables_roundtrip():
    rng = random.Random(1234)
    for _ in range(60):
        n = rng.randint(2, 50)
        counts = [rng.randint(1, 1000) for _ in range(n)]
        tree = HuffmanTree(counts)
        encoder = tree.encoder()
        decoder = tree.decoder()
        for s in range(n):
            assert decoder.decode(encoder.encode(s).iter()) == s


def test_matches_reference_weighted_length():
    rng = random.Random(99)
    for _ in range(60):
        n = rng.randint(2, 50)
        counts = [rng.randint(1, 10_000) for _ in range(n)]
        lengths = HuffmanTree(counts).code_lengths()
        assert _weighted_length(counts, lengths) == _weighted_length(
            counts, _reference_lengths(counts)
        )


def test_no_prefix_code_beats_small_alphabets():
    rng = random.Random(5)
    for _ in range(40):
        n = rng.randint(2, 6)
        counts = [rng.randint(1, 50) for _ in range(n)]
        lengths = HuffmanTree(counts).code_lengths()
        assert _weighted_length(counts, lengths) == _brute_force_best(counts)


def test_ties_keep_optimal_length():
    counts = [4, 4, 4, 4, 2, 2, 2, 2, 8]
    lengths = HuffmanTree(counts).code_lengths()
    assert _weighted_length(counts, lengths) == _weighted_length(
        counts, _reference_lengths(counts)
    )
    assert sum(2 ** -n for n in lengths) == 1.0


def test_higher_count_never_gets_longer_code():
    rng = random.Random(17)
    for _ in range(30):
        counts = [rng.randint(1, 500) for _ in range(rng.randint(2, 40))]
        lengths = HuffmanTree(counts).code_lengths()
        for a, b in itertools.combinations(range(len(counts)), 2):
            if counts[a] > counts[b]:
                assert lengths[a] <= lengths[b]
