#!/usr/bin/env python3
from ds4report.data import constants
from ds4report.data.args import Args
from ds4report.data.config_device import ConfigDevice
from ds4report.ui.cli.cli_main import CliMain
from ds4report.util.logging.logger import Logger
from ds4report.util.logging.logger_cli import LoggerCli
from ds4report.util.logging.logger_device import LoggerDevice
from ds4report.util.os_util import OsUtil


def init_loggers():
    """
    Initialize loggers with a specified log level if they have the argument.
    :return: None
    """
    loggers = (Logger, LoggerDevice, LoggerCli)
    for logger in loggers:
        if Args.args.debug:
            logger.set_level(Logger.DEBUG)
        elif Args.args.extra:
            logger.set_level(Logger.EXTRA)
        elif Args.args.finer:
            logger.set_level(Logger.FINER)
        elif Args.args.verbose:
            logger.set_level(Logger.VERBOSE)
        else:
            logger.set_level(Logger.INFO)


def start():
    """
    Run the CLI until the device fails, the requested count is reached or the user interrupts.
    :return: None
    """
    ui = None
    try:
        ui = CliMain()
        ui.start()
    except KeyboardInterrupt:
        pass
    except Exception as e:
        Logger.throw(e)
    finally:
        if ui:
            ui.stop()
    Logger.info("Exiting")


def log_level():
    """
    Log at every level to display the levels that are enabled.
    :return: None
    """
    Logger.debug("Debug logging enabled")
    Logger.extra("Extra debug logging enabled")
    Logger.finer("Finer debug logging enabled, raw reports are logged")
    Logger.verbose("Verbose logging enabled")


def main():
    """
    Main entry point. Parses arguments, loads configuration files, initializes loggers and starts the main loop.
    :return: None
    """
    Args.parse_args()
    ConfigDevice.load()
    ConfigDevice.save()
    init_loggers()
    Logger.info("Initializing %s version %s", constants.NAME, constants.VERSION)
    Logger.info("Using \"%s\" as home folder.", constants.PATH_ROOT)
    log_level()
    OsUtil.log_info(Logger)
    start()


if __name__ == '__main__':
    main()
