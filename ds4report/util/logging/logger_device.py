from ds4report.util.logging.logger import Logger


class LoggerDevice(Logger):
    def __init__(self, name=None):
        Logger.__init__(self, name)
        LoggerDevice.logger, LoggerDevice.console_handler, LoggerDevice.file_handler = self.create_logger(name)


LoggerDevice("device")
