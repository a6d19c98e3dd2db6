from ds4report.data import constants
from ds4report.data.config import Config


class ConfigDevice:
    config = Config()
    vendor_id = None
    product_id = None
    poll_interval = None
    read_timeout = None
    max_retries = None
    retry_backoff = None

    def __init__(self):
        pass

    @classmethod
    def load(cls, path=constants.PATH_CONF_DEVICE):
        cls.config.load(path)
        # Device
        cls.vendor_id = cls.config.get_int("DEVICE", "vendor_id", 0, 0xffff, constants.VENDOR_ID_SONY,
                                           "USB vendor id of the controller")
        cls.product_id = cls.config.get_int("DEVICE", "product_id", 0, 0xffff, constants.PRODUCT_ID_DS4,
                                            "USB product id of the controller")
        # Polling, stored in milliseconds
        cls.poll_interval = cls.config.get_int("POLLING", "interval_ms", 0, 1000, 0,
                                               "Delay between reads. Applies to both USB and Bluetooth.") / 1000.
        cls.read_timeout = cls.config.get_int("POLLING", "read_timeout_ms", 0, 60 * 1000, 1000,
                                              "Time to wait for a report before retrying.\n"
                                              "0 blocks until a report arrives.") / 1000.
        cls.max_retries = cls.config.get_int("POLLING", "max_retries", 0, 100, 5,
                                             "Consecutive read timeouts tolerated before giving up")
        cls.retry_backoff = cls.config.get_int("POLLING", "retry_backoff_ms", 0, 10 * 1000, 50,
                                               "Initial wait after a timeout, doubled on each retry") / 1000.

    @classmethod
    def save(cls):
        cls.config.save()
