from Base32k.encoding.bitstream import WordBitReader, WordBitWriter, locate


def test_locate():
    assert locate(0) == (0, 0)
    assert locate(30) == (0, 30)
    assert locate(45) == (1, 13)


def test_read_within_word():
    reader = WordBitReader([0x12345678])
    assert reader.read(0) == 0x12345678 >> 17
    assert reader.read(15) == (0x12345678 >> 2) & 0x7FFF


def test_read_straddles_words():
    reader = WordBitReader([0x00000001, 0x80000000])
    # bits 30-31 of the first word, then the top 13 bits of the second
    assert reader.read(30) == 0x3000


def test_read_past_end_is_zero_padded():
    words = [0xFFFFFFFF]
    reader = WordBitReader(words)
    assert reader.read(30) == 0x6000
    assert words == [0xFFFFFFFF]


def test_groups_and_overshoot():
    reader = WordBitReader([0, 0])
    assert list(reader.groups()) == [0, 0, 0, 0, 0]
    assert reader.overshoot() == 75 - 64

    assert WordBitReader([]).overshoot() == 0
    assert WordBitReader([0] * 15).overshoot() == 0


def test_write_straddles_words():
    writer = WordBitWriter()
    writer.write(2, 0x3000)
    assert writer.words == [0x00000001, 0x80000000]


def test_writer_inverts_reader():
    words = [0xDEADBEEF, 0x01234567, 0x89ABCDEF]
    reader = WordBitReader(words)
    writer = WordBitWriter()
    for i, p in enumerate(reader.groups()):
        writer.write(i, p)
    assert writer.words[:3] == words
    assert writer.words[3] == 0


def test_drop_last():
    writer = WordBitWriter()
    writer.drop_last()
    assert writer.words == []
    writer.write(0, 1)
    writer.drop_last()
    assert writer.words == []
