import argparse

from ds4report.data import constants


def hex_int(value):
    return int(value, 0)


class Args:
    args = None

    def __init__(self):
        pass

    @staticmethod
    def parse_args(argv=None):
        arg_parser = argparse.ArgumentParser(description="%s reads controller reports and logs the decoded "
                                                         "state" % constants.NAME)
        # Logging
        arg_parser.add_argument("-d", "--debug", action="store_const", const=True, default=False,
                                help="debug output")
        arg_parser.add_argument("-e", "--extra", action="store_const", const=True, default=False,
                                help="extra debug output")
        arg_parser.add_argument("-f", "--finer", action="store_const", const=True, default=False,
                                help="finer debug output, logs raw reports")
        arg_parser.add_argument("-v", "--verbose", action="store_const", const=True, default=False,
                                help="verbose debug output")
        # Device
        arg_parser.add_argument("--vendor-id", "--vendor_id", type=hex_int, default=None,
                                help="vendor id, overrides the configured value")
        arg_parser.add_argument("--product-id", "--product_id", type=hex_int, default=None,
                                help="product id, overrides the configured value")
        # Polling
        arg_parser.add_argument("-i", "--interval", type=float, default=None,
                                help="seconds between reads")
        arg_parser.add_argument("-t", "--timeout", type=float, default=None,
                                help="seconds to wait for each report")
        arg_parser.add_argument("-n", "--count", type=int, default=None,
                                help="stop after this many reports")
        Args.args = arg_parser.parse_args(argv)
        return Args.args
