import pytest

from ds4report.data.struct.bitfield import extract_bits, little_endian_u16, touch_coordinates


@pytest.mark.parametrize("lo, hi, expected", [
    (0x01, 0x02, 0x0201),
    (0x00, 0x00, 0x0000),
    (0xff, 0xff, 0xffff),
    (0x34, 0x12, 0x1234)
])
def test_little_endian_u16(lo, hi, expected):
    assert little_endian_u16(lo, hi) == expected


def test_extract_bits_all_set():
    window = b"\xff\xff\xff"
    assert extract_bits(window, 8) == 0xfff
    assert extract_bits(window, 20) == 0xfff


def test_extract_bits_nibble_split():
    # High nibble of the middle byte is the low nibble of y
    window = bytes([0x00, 0x10, 0x00])
    assert extract_bits(window, 8) == 0x000
    assert extract_bits(window, 20) == 0x001


def test_extract_bits_layout():
    # x = 0x123, y = 0x456
    window = bytes([0x23, 0x61, 0x45])
    assert touch_coordinates(window) == (0x123, 0x456)


def test_extract_bits_width():
    window = bytes([0xab, 0xcd, 0xef])
    assert extract_bits(window, 8, 8) == 0xab
    assert extract_bits(window, 16, 4) == 0xd
    assert extract_bits(window, 28, 4) == 0xe


def test_extract_bits_accepts_lists():
    assert touch_coordinates([0xff, 0x0f, 0x00]) == (0xfff, 0)
    assert touch_coordinates(bytearray([0x00, 0xf0, 0xff])) == (0, 0xfff)


@pytest.mark.parametrize("window", [b"", b"\x00\x00", b"\x00\x00\x00\x00"])
def test_extract_bits_window_size(window):
    with pytest.raises(ValueError):
        extract_bits(window, 8)
