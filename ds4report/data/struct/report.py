from collections import namedtuple

import construct

from ds4report.data import constants
from ds4report.data.struct.bitfield import little_endian_u16, touch_coordinates, TOUCH_WINDOW_SIZE


class LittleEndianU16(construct.Adapter):
    def __init__(self):
        super().__init__(construct.Bytes(2))

    def _decode(self, obj, context, path):
        return little_endian_u16(obj[0], obj[1])


class TouchWindow(construct.Adapter):
    """
    Two 12 bit coordinates packed in three bytes, x first.
    """
    def __init__(self):
        super().__init__(construct.Bytes(TOUCH_WINDOW_SIZE))

    def _decode(self, obj, context, path):
        x, y = touch_coordinates(obj)
        return construct.Container(x=x, y=y)


face_buttons_data = construct.BitStruct(
    "triangle" / construct.Flag,
    "circle" / construct.Flag,
    "cross" / construct.Flag,
    "square" / construct.Flag,
    "direction" / construct.Nibble
)

shoulder_buttons_data = construct.BitStruct(
    "r3" / construct.Flag,
    "l3" / construct.Flag,
    "options" / construct.Flag,
    "share" / construct.Flag,
    "r2" / construct.Flag,
    "l2" / construct.Flag,
    "r1" / construct.Flag,
    "l1" / construct.Flag
)

extra_buttons_data = construct.BitStruct(
    construct.Padding(6),
    "touchpad_click" / construct.Flag,
    "ps" / construct.Flag
)

vector_data = construct.Struct(
    "x" / LittleEndianU16(),
    "y" / LittleEndianU16(),
    "z" / LittleEndianU16()
)

touch_contact_data = construct.Struct(
    "contact" / construct.BitStruct(
        "active_bit" / construct.Flag,
        construct.Padding(7)
    ),
    "coords" / TouchWindow()
)

# Byte offsets into the full report, report id included
ReportLayout = namedtuple("ReportLayout", (
    "size",
    "sticks",
    "face_buttons",
    "shoulder_buttons",
    "extra_buttons",
    "triggers",
    "gyro_timestamp",
    "gyro",
    "accel",
    "touch_timestamp",
    "touch_contacts"
))

USB_LAYOUT = ReportLayout(
    size=constants.REPORT_SIZE_USB,
    sticks=1,
    face_buttons=5,
    shoulder_buttons=6,
    extra_buttons=7,
    triggers=8,
    gyro_timestamp=10,
    gyro=13,
    accel=19,
    touch_timestamp=34,
    touch_contacts=(35, 39)
)

# Bluetooth reports carry two extra leading bytes
BLUETOOTH_LAYOUT = ReportLayout(
    size=constants.REPORT_SIZE_BLUETOOTH,
    sticks=3,
    face_buttons=7,
    shoulder_buttons=8,
    extra_buttons=9,
    triggers=10,
    gyro_timestamp=12,
    gyro=15,
    accel=21,
    touch_timestamp=37,
    touch_contacts=(37, 41)
)


def build_report_struct(layout):
    """
    Create a parser reading every field of a report at the offsets given by the layout.
    :param layout: ReportLayout
    :return: construct.Struct
    """
    return construct.Struct(
        "left_stick_x" / construct.Pointer(layout.sticks, construct.Int8ul),
        "left_stick_y" / construct.Pointer(layout.sticks + 1, construct.Int8ul),
        "right_stick_x" / construct.Pointer(layout.sticks + 2, construct.Int8ul),
        "right_stick_y" / construct.Pointer(layout.sticks + 3, construct.Int8ul),
        "face_buttons" / construct.Pointer(layout.face_buttons, face_buttons_data),
        "shoulder_buttons" / construct.Pointer(layout.shoulder_buttons, shoulder_buttons_data),
        "extra_buttons" / construct.Pointer(layout.extra_buttons, extra_buttons_data),
        "l2_trigger" / construct.Pointer(layout.triggers, construct.Int8ul),
        "r2_trigger" / construct.Pointer(layout.triggers + 1, construct.Int8ul),
        "gyro_timestamp" / construct.Pointer(layout.gyro_timestamp, LittleEndianU16()),
        "gyro" / construct.Pointer(layout.gyro, vector_data),
        "accel" / construct.Pointer(layout.accel, vector_data),
        "touch_timestamp" / construct.Pointer(layout.touch_timestamp, construct.Int8ul),
        "touch_1" / construct.Pointer(layout.touch_contacts[0], touch_contact_data),
        "touch_2" / construct.Pointer(layout.touch_contacts[1], touch_contact_data)
    )


usb_report = build_report_struct(USB_LAYOUT)
bluetooth_report = build_report_struct(BLUETOOTH_LAYOUT)
