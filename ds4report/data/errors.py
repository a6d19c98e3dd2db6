class ReportError(Exception):
    """
    Base of every error raised while opening, reading or decoding controller reports.
    """
    pass


class OpenError(ReportError):
    def __init__(self, vendor_id, product_id, reason=None):
        """
        The device is absent or access was denied. Fatal.
        """
        self.vendor_id = vendor_id
        self.product_id = product_id
        self.reason = reason
        message = "Could not open device %04x:%04x" % (vendor_id, product_id)
        if reason:
            message += ": %s" % reason
        super().__init__(message)


class UnrecognizedReportSize(ReportError):
    def __init__(self, length):
        """
        The first report length matched no known transport. Fatal for the session.
        """
        self.length = length
        super().__init__("Unrecognized report size: %d bytes" % length)


class TruncatedReport(ReportError):
    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__("Report too short: expected %d bytes, got %d" % (expected, actual))


class DeviceIOError(ReportError):
    pass


class ReadTimeout(DeviceIOError):
    """
    No report arrived in time. Recoverable.
    """
    pass


class DeviceDisconnected(DeviceIOError):
    """
    The device went away mid-session. Fatal.
    """
    pass
