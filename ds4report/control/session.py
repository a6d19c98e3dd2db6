import threading
import time

from ds4report.control.decoder import get_decoder
from ds4report.data import constants
from ds4report.data.errors import ReadTimeout
from ds4report.data.transport import classify
from ds4report.util.logging.logger_device import LoggerDevice
from ds4report.util.status_notifier import StatusNotifier


class Session(StatusNotifier):
    STOPPED = "STOPPED"
    CONNECTING = "CONNECTING"
    RUNNING = "RUNNING"
    CRASHED = "CRASHED"

    def __init__(self, device, poll_interval=0., read_timeout=1., max_retries=5, retry_backoff=0.05,
                 sleep=time.sleep):
        """
        Reads reports from an open device and decodes them.
        :param device: object with read(size, timeout) returning bytes
        :param poll_interval: seconds to wait between reads
        :param read_timeout: seconds to wait for one report
        :param max_retries: consecutive timeouts tolerated by a single read
        :param retry_backoff: first retry delay in seconds, doubled each retry
        :param sleep: delay function used between retries
        """
        super().__init__()
        self.device = device
        self.poll_interval = poll_interval
        self.read_timeout = read_timeout
        self.max_retries = max_retries
        self.retry_backoff = retry_backoff
        self.sleep = sleep
        self.connection_type = None
        self.decoder = None
        self.set_status(self.STOPPED)

    def connect(self):
        """
        Classify the transport from the first report. Only done once per session.
        :return: ConnectionType
        """
        if self.connection_type:
            return self.connection_type
        self.set_status(self.CONNECTING)
        try:
            report = self.read_report()
            connection_type = classify(len(report))
        except Exception:
            self.set_status(self.CRASHED)
            raise
        self.connection_type = connection_type
        self.decoder = get_decoder(connection_type)
        LoggerDevice.info("Connected with %s", connection_type.value)
        return connection_type

    def read_report(self):
        """
        Read a raw report, retrying timeouts with exponential backoff.
        :return: bytes
        """
        attempt = 0
        while True:
            try:
                return self.device.read(constants.REPORT_SIZE_MAX, self.read_timeout)
            except ReadTimeout:
                if attempt >= self.max_retries:
                    LoggerDevice.warn("Giving up after %d read timeouts", attempt + 1)
                    raise
                delay = self.retry_backoff * (2 ** attempt)
                attempt += 1
                LoggerDevice.debug("Read timed out, retry %d/%d in %.3fs", attempt, self.max_retries, delay)
                self.sleep(delay)

    def read_state(self):
        """
        Read and decode one report.
        :return: ControllerState
        """
        if not self.decoder:
            raise RuntimeError("Session is not connected")
        report = self.read_report()
        LoggerDevice.finer("Report: %s", report.hex())
        return self.decoder.decode(report)

    def run(self, callback, stop_event=None, count=None):
        """
        Poll until the stop event is set, count states were delivered or the device fails.
        :param callback: called with each ControllerState
        :param stop_event: threading.Event checked before every read
        :param count: optional number of states to deliver
        :return: number of states delivered
        """
        if stop_event is None:
            stop_event = threading.Event()
        self.connect()
        self.set_status(self.RUNNING)
        delivered = 0
        try:
            while not stop_event.is_set() and (count is None or delivered < count):
                callback(self.read_state())
                delivered += 1
                if self.poll_interval and (count is None or delivered < count):
                    stop_event.wait(self.poll_interval)
        except Exception:
            self.set_status(self.CRASHED)
            raise
        self.set_status(self.STOPPED)
        return delivered

    def close(self):
        self.device.close()
        self.set_status(self.STOPPED)
