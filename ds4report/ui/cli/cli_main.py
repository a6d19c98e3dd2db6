import threading

from ds4report.control.device import HidDevice
from ds4report.control.session import Session
from ds4report.data.args import Args
from ds4report.data.config_device import ConfigDevice
from ds4report.data.errors import OpenError, UnrecognizedReportSize
from ds4report.util.logging.logger_cli import LoggerCli


class CliMain:
    def __init__(self, device=None):
        self.device = device or HidDevice()
        self.session = None
        self.stop_event = threading.Event()

    def start(self):
        vendor_id = self.option(Args.args.vendor_id, ConfigDevice.vendor_id)
        product_id = self.option(Args.args.product_id, ConfigDevice.product_id)
        try:
            self.device.open(vendor_id, product_id)
        except OpenError as e:
            LoggerCli.throw(e, "Is the controller connected and readable by this user?")
        self.session = Session(self.device,
                               poll_interval=self.option(Args.args.interval, ConfigDevice.poll_interval),
                               read_timeout=self.option(Args.args.timeout, ConfigDevice.read_timeout),
                               max_retries=ConfigDevice.max_retries,
                               retry_backoff=ConfigDevice.retry_backoff)
        self.session.add_status_change_listener(self.status_changed)
        try:
            delivered = self.session.run(self.print_state, self.stop_event, Args.args.count)
        except UnrecognizedReportSize as e:
            LoggerCli.throw(e, "Could not determine the transport.")
        else:
            LoggerCli.info("Decoded %d reports", delivered)

    def stop(self):
        LoggerCli.info("Stopping")
        self.stop_event.set()
        if self.session:
            self.session.close()
        else:
            self.device.close()

    @staticmethod
    def option(arg_value, config_value):
        return config_value if arg_value is None else arg_value

    @staticmethod
    def print_state(state):
        LoggerCli.info(state.describe())

    @staticmethod
    def status_changed(status):
        LoggerCli.debug("Session status changed to %s.", status)
