"""
Alphabet mapping between 15-bit groups and normalization-stable codepoints.

Data groups are spread over three contiguous ranges:

    U+3400 thru U+4DB5 for 15-bit values of 0 thru 6581
    U+4E00 thru U+9FA5 for 15-bit values of 6582 thru 27483
    U+E000 thru U+F4A3 for 15-bit values of 27484 thru 32767

The terminator is taken from U+2401 thru U+240F, its offset from U+2400
being the number of significant bits in the preceding data character.
"""

from Base32k.errors import InvalidEncoding
from Base32k.encoding.constants import (
    BITS_PER_CHAR,
    DATA_RANGES,
    MAX_GROUP,
    TERMINATOR_BASE,
    TERMINATOR_FIRST,
    TERMINATOR_LAST,
)


def to_char(p: int) -> str:
    """
    Maps a 15-bit group to its data character.

    Args:
        p: Group value in [0, 32767]

    Returns:
        Single-character string
    """
    if not 0 <= p <= MAX_GROUP:
        raise ValueError(f"Group value out of range: {p}")

    for first_value, first_code, last_code in reversed(DATA_RANGES[1:]):
        if p >= first_value:
            return chr(first_code + p - first_value)
    return chr(DATA_RANGES[0][1] + p)

def from_char(ch: str) -> int:
    """
    Maps a data character back to its 15-bit group.

    Raises:
        InvalidEncoding: if the character is in none of the data ranges
    """
    code = ord(ch)
    for first_value, first_code, last_code in DATA_RANGES:
        if first_code <= code <= last_code:
            return first_value + code - first_code
    raise InvalidEncoding(code)

def is_data_char(ch: str) -> bool:
    code = ord(ch)
    return any(first <= code <= last for _, first, last in DATA_RANGES)

def to_terminator(bits: int) -> str:
    """Maps a significant-bit count (1-15) to its terminator character."""
    if not 1 <= bits <= BITS_PER_CHAR:
        raise ValueError(f"Significant bit count out of range: {bits}")
    return chr(TERMINATOR_BASE + bits)

def from_terminator(ch: str) -> int:
    """
    Maps a terminator character back to its significant-bit count.

    Raises:
        InvalidEncoding: if the character is not in U+2401 thru U+240F
    """
    code = ord(ch)
    if not TERMINATOR_FIRST <= code <= TERMINATOR_LAST:
        raise InvalidEncoding(code)
    return code - TERMINATOR_BASE

def is_terminator(ch: str) -> bool:
    return TERMINATOR_FIRST <= ord(ch) <= TERMINATOR_LAST
