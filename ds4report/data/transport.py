from enum import Enum

from ds4report.data import constants
from ds4report.data.errors import UnrecognizedReportSize


class ConnectionType(Enum):
    USB = "USB"
    BLUETOOTH = "Bluetooth"

    @property
    def report_size(self):
        return _REPORT_SIZES[self]


_REPORT_SIZES = {
    ConnectionType.USB: constants.REPORT_SIZE_USB,
    ConnectionType.BLUETOOTH: constants.REPORT_SIZE_BLUETOOTH
}


def classify(length):
    """
    Determine the transport from the length of the first report read from the device.
    :param length: number of bytes returned by the first read
    :return: ConnectionType
    """
    for connection_type, size in _REPORT_SIZES.items():
        if length == size:
            return connection_type
    raise UnrecognizedReportSize(length)
