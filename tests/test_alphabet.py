import pytest

from Base32k.errors import InvalidEncoding
from Base32k.encoding.alphabet import (
    from_char,
    from_terminator,
    is_data_char,
    is_terminator,
    to_char,
    to_terminator,
)


@pytest.mark.parametrize(
    "p, code",
    [
        (0, 0x3400),
        (6581, 0x4DB5),
        (6582, 0x4E00),
        (27483, 0x9FA5),
        (27484, 0xE000),
        (32767, 0xF4A3),
    ],
)
def test_range_boundaries(p, code):
    assert to_char(p) == chr(code)
    assert from_char(chr(code)) == p


def test_every_group_maps_back():
    chars = [to_char(p) for p in range(32768)]
    assert len(set(chars)) == 32768
    assert all(from_char(ch) == p for p, ch in enumerate(chars))


@pytest.mark.parametrize("code", [0x0000, 0x0021, 0x2401, 0x33FF, 0x4DB6, 0x4DFF, 0x9FA6, 0xDFFF, 0xF4A4])
def test_from_char_rejects_outside_ranges(code):
    with pytest.raises(InvalidEncoding) as excinfo:
        from_char(chr(code))
    assert excinfo.value.codepoint == code
    assert not is_data_char(chr(code))


@pytest.mark.parametrize("p", [-1, 32768])
def test_to_char_domain(p):
    with pytest.raises(ValueError):
        to_char(p)


def test_terminators():
    assert to_terminator(1) == "\u2401"
    assert to_terminator(15) == "\u240f"
    for bits in range(1, 16):
        assert from_terminator(to_terminator(bits)) == bits
        assert is_terminator(to_terminator(bits))


@pytest.mark.parametrize("code", [0x2400, 0x2410, 0x3400])
def test_from_terminator_rejects(code):
    with pytest.raises(InvalidEncoding) as excinfo:
        from_terminator(chr(code))
    assert excinfo.value.codepoint == code
    assert not is_terminator(chr(code))


@pytest.mark.parametrize("bits", [0, 16])
def test_to_terminator_domain(bits):
    with pytest.raises(ValueError):
        to_terminator(bits)
