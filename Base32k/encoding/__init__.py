"""
Base32k encoding and decoding.

Packs 32-bit words into text at 15 bits per character.
"""

from Base32k.encoding.codec import encode, decode, encoded_length
from Base32k.encoding.batch import encode_batch, decode_batch
from Base32k.encoding.words import bytes_to_words, words_to_bytes, encode_bytes, decode_bytes
from Base32k.encoding.config import CodecConfig
from Base32k.encoding.constants import (
    BITS_PER_CHAR,
    WORD_BITS,
    DATA_RANGES,
    TERMINATOR_BASE,
)

__all__ = [
    "encode",
    "decode",
    "encoded_length",
    "encode_batch",
    "decode_batch",
    "bytes_to_words",
    "words_to_bytes",
    "encode_bytes",
    "decode_bytes",
    "CodecConfig",
    "BITS_PER_CHAR",
    "WORD_BITS",
    "DATA_RANGES",
    "TERMINATOR_BASE",
]
