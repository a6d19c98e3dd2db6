import os

# Keep test runs out of the user's log directory
os.environ.setdefault("DS4REPORT_NO_LOG_FILE", "1")
