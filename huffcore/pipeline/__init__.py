from huffcore.pipeline.stream import count_frequencies, decode_symbols, encode_symbols

__all__ = [
    "count_frequencies",
    "decode_symbols",
    "encode_symbols",
]
