from ds4report.data.struct.report import LittleEndianU16, TouchWindow, bluetooth_report, touch_contact_data, \
    usb_report


def test_little_endian_adapter():
    assert LittleEndianU16().parse(b"\x34\x12") == 0x1234


def test_touch_window_adapter():
    coords = TouchWindow().parse(bytes([0x23, 0x61, 0x45]))
    assert (coords.x, coords.y) == (0x123, 0x456)


def test_touch_contact_ignores_tracking_id():
    contact = touch_contact_data.parse(bytes([0x7f, 0xff, 0xff, 0xff]))
    assert not contact.contact.active_bit
    assert (contact.coords.x, contact.coords.y) == (0xfff, 0xfff)
    assert touch_contact_data.parse(bytes([0x80, 0, 0, 0])).contact.active_bit


def test_parsers_read_their_own_offsets():
    report = bytearray(78)
    report[1] = 0x11
    report[3] = 0x33
    assert usb_report.parse(bytes(report[:64])).left_stick_x == 0x11
    assert bluetooth_report.parse(bytes(report)).left_stick_x == 0x33
