BITS_PER_CHAR = 15
WORD_BITS = 32

GROUP_MASK = 0x7FFF
WORD_MASK = 0xFFFFFFFF
MAX_GROUP = GROUP_MASK

# Largest in-word bit offset at which a whole group still fits in one word.
MAX_ALIGNED_OFFSET = WORD_BITS - BITS_PER_CHAR

# (first group value, first codepoint, last codepoint)
DATA_RANGES = (
    (0, 0x3400, 0x4DB5),
    (6582, 0x4E00, 0x9FA5),
    (27484, 0xE000, 0xF4A3),
)

TERMINATOR_BASE = 0x2400
TERMINATOR_FIRST = TERMINATOR_BASE + 1
TERMINATOR_LAST = TERMINATOR_BASE + BITS_PER_CHAR
