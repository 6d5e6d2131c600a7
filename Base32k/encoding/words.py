"""
Conversion between byte strings and 32-bit words, and byte-level codec helpers.
"""

import numpy as np
from typing import List, Optional

from Base32k.encoding.codec import encode, decode, as_words
from Base32k.encoding.config import CodecConfig
from Base32k.encoding.constants import WORD_BITS


WORD_BYTES = WORD_BITS // 8


def bytes_to_words(data: bytes, byteorder: str = "big") -> List[int]:
    """
    Splits a byte string into 32-bit words.

    Args:
        data: Input bytes; the length must be a multiple of four
        byteorder: "big" or "little"

    Returns:
        List of unsigned 32-bit integers
    """
    if len(data) % WORD_BYTES:
        raise ValueError(
            f"Byte length must be a multiple of {WORD_BYTES}, got {len(data)}"
        )
    config = CodecConfig(byteorder=byteorder).validate()
    return np.frombuffer(data, dtype=config.word_dtype).tolist()

def words_to_bytes(words, byteorder: str = "big") -> bytes:
    """Joins 32-bit words into a byte string."""
    config = CodecConfig(byteorder=byteorder).validate()
    return np.array(as_words(words), dtype=np.uint64).astype(config.word_dtype).tobytes()

def encode_bytes(data: bytes, config: Optional[CodecConfig] = None) -> str:
    """Encodes a word-aligned byte string as base32k text."""
    config = (config or CodecConfig()).validate()
    return encode(bytes_to_words(data, config.byteorder))

def decode_bytes(text: str, config: Optional[CodecConfig] = None) -> bytes:
    """Decodes base32k text to the byte string it was built from."""
    config = (config or CodecConfig()).validate()
    return words_to_bytes(decode(text), config.byteorder)
