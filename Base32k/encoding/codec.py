"""
Encoding and decoding of 32-bit word sequences to base32k text and back.
"""

import math
import torch
import numpy as np
from typing import Iterable, List, Union

from Base32k.errors import InvalidEncoding
from Base32k.encoding.alphabet import to_char, from_char, to_terminator, from_terminator
from Base32k.encoding.bitstream import WordBitReader, WordBitWriter
from Base32k.encoding.constants import BITS_PER_CHAR, WORD_BITS, WORD_MASK
from Base32k.utils.logging import get_logger


Words = Union[torch.Tensor, np.ndarray, Iterable[int]]


def as_words(words: Words) -> List[int]:
    """
    Converts a word sequence to a list of unsigned 32-bit ints.

    Values are taken modulo 2**32, so signed int32 storage encodes as its
    unsigned bit pattern.

    Args:
        words: List, tuple, 1-D array or 1-D tensor of integers

    Returns:
        List of ints in [0, 2**32)
    """
    if isinstance(words, (str, bytes, bytearray)):
        raise TypeError(
            f"Expected a sequence of integers, got {type(words).__name__}; "
            "use encode_bytes for byte strings"
        )
    if isinstance(words, torch.Tensor):
        words = words.detach().cpu().numpy()
    if isinstance(words, np.ndarray):
        if words.ndim != 1:
            raise ValueError(f"Expected a 1-D word array, got shape {words.shape}")
        if words.dtype.kind not in "iu":
            raise TypeError(f"Expected an integer array, got dtype {words.dtype}")
        words = words.tolist()

    out = []
    for w in words:
        if isinstance(w, bool) or not isinstance(w, (int, np.integer)):
            raise TypeError(f"Expected an integer word, got {type(w).__name__}: {w!r}")
        out.append(int(w) & WORD_MASK)
    return out

def encoded_length(word_count: int) -> int:
    """Gets the length of the text produced for word_count words."""
    return math.ceil(word_count * WORD_BITS / BITS_PER_CHAR) + 1

def encode(words: Words) -> str:
    """
    Encodes a word sequence as base32k text.

    Every 15 bits of the stream become one data character; a terminator
    recording how many bits of the last data character are significant is
    always appended.

    Args:
        words: Sequence of unsigned 32-bit integers

    Returns:
        Encoded string of length ceil(len(words) * 32 / 15) + 1
    """
    reader = WordBitReader(as_words(words))
    chars = [to_char(p) for p in reader.groups()]
    chars.append(to_terminator(BITS_PER_CHAR - reader.overshoot()))

    logger = get_logger()
    if logger.is_debug():
        logger.debug(f"Encoded {len(reader.words)} words into {len(chars)} characters")
    return "".join(chars)

def decode(text: str) -> List[int]:
    """
    Decodes base32k text back to a list of words.

    Args:
        text: Encoded string, data characters followed by one terminator

    Returns:
        Newly built list of unsigned 32-bit integers

    Raises:
        InvalidEncoding: if the text is empty, the last character is not a
            terminator, or any other character is outside the data ranges
    """
    logger = get_logger()
    if not text:
        logger.debug("Rejecting empty input: no terminator")
        raise InvalidEncoding(None)

    try:
        tail_bits = from_terminator(text[-1])
        writer = WordBitWriter()
        for i, ch in enumerate(text[:-1]):
            writer.write(i, from_char(ch))
    except InvalidEncoding as e:
        logger.debug(f"Rejecting input of {len(text)} characters: {e}")
        raise

    if tail_bits < BITS_PER_CHAR:
        writer.drop_last()

    if logger.is_debug():
        logger.debug(
            f"Decoded {len(text)} characters into {len(writer.words)} words "
            f"(tail bits: {tail_bits})"
        )
    return writer.words
