import logging
import os
import shutil

from ds4report.data import constants
from ds4report.util.os_util import OsUtil

EXTRA = logging.DEBUG - 1
FINER = logging.DEBUG - 2
VERBOSE = logging.DEBUG - 3
FORMAT = "%(asctime)s %(levelname)s:%(name)s %(message)s"

logging.addLevelName(EXTRA, "EXTRA")
logging.addLevelName(FINER, "FINER")
logging.addLevelName(VERBOSE, "VERBOSE")


class Logger:
    INFO = logging.INFO
    DEBUG = logging.DEBUG
    EXTRA = EXTRA
    FINER = FINER
    VERBOSE = VERBOSE
    logger = logging.getLogger("ds4report")
    console_handler = None
    file_handler = None

    def __init__(self, name=None):
        if not Logger.console_handler:
            Logger.logger, Logger.console_handler, Logger.file_handler = self.create_logger(name)

    @classmethod
    def info(cls, message, *args):
        cls.logger.info(message, *args)

    @classmethod
    def debug(cls, message, *args):
        cls.logger.debug(message, *args)

    @classmethod
    def extra(cls, message, *args):
        cls.logger.log(EXTRA, message, *args)

    @classmethod
    def finer(cls, message, *args):
        cls.logger.log(FINER, message, *args)

    @classmethod
    def verbose(cls, message, *args):
        cls.logger.log(VERBOSE, message, *args)

    @classmethod
    def warn(cls, message, *args):
        cls.logger.warning(message, *args)

    @classmethod
    def set_level(cls, level):
        for target in (cls.logger, cls.console_handler, cls.file_handler):
            if target:
                target.setLevel(level)

    @classmethod
    def throw(cls, exception, message=None, *args):
        """
        Log a crash banner with platform details. Subclasses re-raise, the root logger only reports.
        :param exception: exception or message that ended the run
        :param message: optional context logged before the exception
        :return: None
        """
        banner = "=" * 10 + " [ CRASH ] " + "=" * 10
        cls.logger.error(banner)
        OsUtil.log_info(cls.logger)
        if message:
            cls.logger.error(message, *args)
        if isinstance(exception, Exception):
            cls.logger.error("%s: %s", type(exception).__name__, exception, exc_info=exception)
        else:
            cls.logger.error(exception)
        cls.logger.error(banner)
        if cls != Logger:
            raise exception

    @staticmethod
    def create_logger(name):
        logger = logging.getLogger(name)
        formatter = logging.Formatter(FORMAT)
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)
        if not constants.LOG_TO_FILE:
            return logger, console_handler, None
        # The previous run is kept as <name>-1.log
        os.makedirs(constants.PATH_LOG_DIR, exist_ok=True)
        log_path = os.path.join(constants.PATH_LOG_DIR, name + ".log")
        if os.path.exists(log_path):
            shutil.move(log_path, os.path.join(constants.PATH_LOG_DIR, name + "-1.log"))
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        return logger, console_handler, file_handler


Logger("ds4report")
