import os
import platform as _platform
import distro as _distro


class OsUtil:
    platform = os.name
    name = _platform.system()
    release = _platform.release()
    distro = _distro.name(pretty=True)

    def __init__(self):
        pass

    @classmethod
    def is_linux(cls):
        return "linux" in cls.name.lower()

    @classmethod
    def log_info(cls, logger):
        logger.debug("OS platform: %s", cls.platform)
        logger.debug("OS name: %s", cls.name)
        if cls.is_linux():
            logger.debug("OS distro: %s", cls.distro)
        logger.debug("OS release: %s", cls.release)
        if cls.is_linux():
            # hidraw nodes are root only without a udev rule
            logger.debug("Running as root: %s", os.geteuid() == 0)
