"""
Bit cursor over a sequence of 32-bit words.

The words are treated as one MSB-first bitstream (bit 0 is the most
significant bit of the first word) cut into 15-bit groups. Since 15 does
not divide 32, a group either lies inside one word or straddles two.
"""

from typing import List, Sequence, Tuple

from Base32k.encoding.constants import (
    BITS_PER_CHAR,
    GROUP_MASK,
    MAX_ALIGNED_OFFSET,
    WORD_BITS,
    WORD_MASK,
)


def locate(position: int) -> Tuple[int, int]:
    """Splits a bitstream position into (word index, bit offset in word)."""
    return position // WORD_BITS, position % WORD_BITS


class WordBitReader:
    """Reads 15-bit groups out of a word sequence."""

    def __init__(self, words: Sequence[int]):
        self.words = words
        self.bit_length = len(words) * WORD_BITS

    def word(self, index: int) -> int:
        # Past the end the stream is zero padded.
        if index >= len(self.words):
            return 0
        return self.words[index]

    def read(self, position: int) -> int:
        """
        Reads the group starting at a bit position.

        Args:
            position: Bitstream position, a multiple of 15

        Returns:
            Group value in [0, 32767]
        """
        q, r = locate(position)
        if r <= MAX_ALIGNED_OFFSET:
            return GROUP_MASK & (self.word(q) >> (MAX_ALIGNED_OFFSET - r))

        high = GROUP_MASK & (self.word(q) << (r - MAX_ALIGNED_OFFSET))
        low = self.word(q + 1) >> (WORD_BITS + MAX_ALIGNED_OFFSET - r)
        return high | low

    def groups(self):
        """Yields every group covering the stream, the last one zero padded."""
        for position in range(0, self.bit_length, BITS_PER_CHAR):
            yield self.read(position)

    def overshoot(self) -> int:
        """Bits of padding consumed by the final group (0-14)."""
        return -self.bit_length % BITS_PER_CHAR


class WordBitWriter:
    """Reassembles a word list from 15-bit groups written in order."""

    def __init__(self):
        self.words: List[int] = []

    def _or(self, index: int, value: int) -> None:
        while len(self.words) <= index:
            self.words.append(0)
        self.words[index] |= value

    def write(self, index: int, p: int) -> None:
        """
        ORs a group into the stream.

        Args:
            index: Group index; the group lands at bit position index * 15
            p: Group value in [0, 32767]
        """
        q, r = locate(index * BITS_PER_CHAR)
        if r <= MAX_ALIGNED_OFFSET:
            self._or(q, p << (MAX_ALIGNED_OFFSET - r))
        else:
            self._or(q, p >> (r - MAX_ALIGNED_OFFSET))
            self._or(q + 1, WORD_MASK & (p << (WORD_BITS + MAX_ALIGNED_OFFSET - r)))

    def drop_last(self) -> None:
        """Discards the final word, which only holds boundary padding."""
        if self.words:
            self.words.pop()
