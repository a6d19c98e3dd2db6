TOUCH_WINDOW_SIZE = 3
TOUCH_X_SHIFT = 8
TOUCH_Y_SHIFT = 20


def little_endian_u16(lo, hi):
    return lo | (hi << 8)


def extract_bits(window, shift, width=12):
    """
    Read a bit field out of a packed three byte window.
    The window bytes sit above a zero low byte of a 32 bit little endian value, so shift 8 starts at the first
    window byte.
    :param window: three bytes
    :param shift: bit offset into the 32 bit value
    :param width: field width in bits
    :return: int
    """
    if len(window) != TOUCH_WINDOW_SIZE:
        raise ValueError("Expected a %d byte window, got %d bytes" % (TOUCH_WINDOW_SIZE, len(window)))
    value = int.from_bytes(b"\x00" + bytes(window), "little")
    return (value >> shift) & ((1 << width) - 1)


def touch_coordinates(window):
    """
    Unpack the 12 bit x and y of a touch contact.
    :param window: three bytes
    :return: (x, y)
    """
    return extract_bits(window, TOUCH_X_SHIFT), extract_bits(window, TOUCH_Y_SHIFT)
