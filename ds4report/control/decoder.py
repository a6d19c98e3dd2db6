from ds4report.data import constants
from ds4report.data.errors import TruncatedReport
from ds4report.data.state import Buttons, ControllerState, Motion, Sticks, TouchContact, Touchpad, Triggers, \
    Vector3, direction_from_nibble
from ds4report.data.struct import report
from ds4report.data.transport import ConnectionType


class ReportDecoder:
    structs = {
        ConnectionType.USB: report.usb_report,
        ConnectionType.BLUETOOTH: report.bluetooth_report
    }

    def __init__(self, connection_type):
        """
        Stateless decoder for one transport. Safe to share between threads.
        :param connection_type: ConnectionType the reports were classified as
        """
        self.connection_type = connection_type
        self.report_size = connection_type.report_size
        self.struct = self.structs[connection_type]

    def decode(self, buffer):
        """
        Decode one raw report.
        :param buffer: bytes, bytearray, memoryview or list of ints
        :return: ControllerState
        """
        data = bytes(buffer)
        if len(data) < self.report_size:
            raise TruncatedReport(self.report_size, len(data))
        parsed = self.struct.parse(data[:self.report_size])
        face = parsed.face_buttons
        shoulder = parsed.shoulder_buttons
        return ControllerState(
            direction=direction_from_nibble(face.direction),
            buttons=Buttons(
                triangle=face.triangle,
                circle=face.circle,
                cross=face.cross,
                square=face.square,
                l1=shoulder.l1,
                r1=shoulder.r1,
                l2=shoulder.l2,
                r2=shoulder.r2,
                l3=shoulder.l3,
                r3=shoulder.r3,
                options=shoulder.options,
                share=shoulder.share,
                touchpad_click=parsed.extra_buttons.touchpad_click
            ),
            sticks=Sticks(parsed.left_stick_x, parsed.left_stick_y, parsed.right_stick_x, parsed.right_stick_y),
            triggers=Triggers(parsed.l2_trigger, parsed.r2_trigger),
            motion=Motion(
                gyro_timestamp=parsed.gyro_timestamp,
                gyro=Vector3(parsed.gyro.x, parsed.gyro.y, parsed.gyro.z),
                accel=Vector3(parsed.accel.x, parsed.accel.y, parsed.accel.z)
            ),
            touchpad=Touchpad(
                timestamp=parsed.touch_timestamp,
                contacts=(self.touch_contact(parsed.touch_1), self.touch_contact(parsed.touch_2))
            )
        )

    @staticmethod
    def touch_contact(data):
        active = data.contact.active_bit == constants.TOUCH_ACTIVE_WHEN_BIT_SET
        return TouchContact(active, data.coords.x, data.coords.y)


_decoders = {connection_type: ReportDecoder(connection_type) for connection_type in ConnectionType}


def get_decoder(connection_type):
    return _decoders[connection_type]


def decode(connection_type, buffer):
    """
    Decode a report read from a device of the given transport.
    :param connection_type: ConnectionType
    :param buffer: raw report
    :return: ControllerState
    """
    return _decoders[connection_type].decode(buffer)


def decode_usb(buffer):
    return decode(ConnectionType.USB, buffer)


def decode_bluetooth(buffer):
    return decode(ConnectionType.BLUETOOTH, buffer)
