import os

# Info
VERSION = "1.0"
NAME = "DS4 Report Decoder"

# Paths
PATH_ROOT = os.path.expanduser("~/.ds4report/")
PATH_LOG_DIR = os.path.join(PATH_ROOT, "log/")
PATH_CONF_DEVICE = os.path.join(PATH_ROOT, "device.conf")
LOG_TO_FILE = os.environ.get("DS4REPORT_NO_LOG_FILE", "").lower() not in ("1", "true", "yes")

# Device
VENDOR_ID_SONY = 0x054C
PRODUCT_ID_DS4 = 0x09CC

# Report sizes
REPORT_SIZE_USB = 64
REPORT_SIZE_BLUETOOTH = 78
REPORT_SIZE_MAX = REPORT_SIZE_BLUETOOTH

# Touch contact byte, bit 7. Captures disagree on polarity; confirm against a device before changing.
TOUCH_ACTIVE_WHEN_BIT_SET = True

# Touch coordinates are 12 bit
TOUCH_COORD_MAX = 0xFFF
