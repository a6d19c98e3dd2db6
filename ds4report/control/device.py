import hid

from ds4report.data.errors import DeviceDisconnected, OpenError, ReadTimeout
from ds4report.util.logging.logger_device import LoggerDevice


class HidDevice:
    def __init__(self):
        """
        Raw report source backed by hidapi.
        """
        self.handle = None
        self.vendor_id = None
        self.product_id = None

    def open(self, vendor_id, product_id):
        """
        Open the first device matching the ids.
        :param vendor_id: USB vendor id
        :param product_id: USB product id
        :return: None
        """
        self.vendor_id = vendor_id
        self.product_id = product_id
        LoggerDevice.debug("Opening device %04x:%04x", vendor_id, product_id)
        handle = hid.device()
        try:
            handle.open(vendor_id, product_id)
        except OSError as e:
            raise OpenError(vendor_id, product_id, str(e)) from e
        self.handle = handle
        LoggerDevice.info("Opened %s %s", handle.get_manufacturer_string(), handle.get_product_string())

    def read(self, size, timeout=None):
        """
        Read one report.
        :param size: maximum number of bytes to read
        :param timeout: seconds to wait, None or 0 blocks
        :return: bytes
        """
        if not self.handle:
            raise DeviceDisconnected("Device is not open")
        timeout_ms = int(timeout * 1000) if timeout else 0
        try:
            data = self.handle.read(size, timeout_ms)
        except (OSError, ValueError) as e:
            raise DeviceDisconnected(str(e)) from e
        if not data:
            raise ReadTimeout("No report within %d ms" % timeout_ms)
        LoggerDevice.verbose("Read %d bytes", len(data))
        return bytes(data)

    def close(self):
        if self.handle:
            self.handle.close()
            self.handle = None
            LoggerDevice.debug("Closed device %04x:%04x", self.vendor_id, self.product_id)
