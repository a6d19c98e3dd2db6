import configparser
import os


class Config:

    def __init__(self):
        self.path = ""
        self.config = configparser.ConfigParser(allow_no_value=True)

    def load(self, path):
        self.path = os.path.expanduser(path)
        self.config = configparser.ConfigParser(allow_no_value=True)
        self.config.read(self.path)

    def get_int(self, section, option, min_val, max_val, default, comment=""):
        try:
            value = self._read_int(section, option)
        except (ValueError, configparser.NoSectionError, configparser.NoOptionError):
            self.add_value(section, option, default, comment, min_val, max_val, default)
            return default
        self.add_value(section, option, value, comment, min_val, max_val, default)
        return self.get_min_max(value, min_val, max_val)

    def _read_int(self, section, option):
        # Accepts hex ids such as 0x054c
        return int(self.config.get(section, option), 0)

    def add_value(self, section, option, value, comment, min_val=None, max_val=None, default=None):
        if not self.config.has_section(section):
            self.config.add_section(section)
        if comment:
            self.config.set(section, "# " + comment.replace("\n", "\n# "))
        comment_str = "min: %s " % min_val if min_val is not None else ""
        comment_str += "max: %s " % max_val if max_val is not None else ""
        comment_str += "default: %s " % default if default is not None else ""
        if comment_str:
            self.config.set(section, "# " + comment_str)
        if self.config.has_option(section, option):
            self.config.remove_option(section, option)
        self.config.set(section, option, str(value))

    @staticmethod
    def get_min_max(value, min_val, max_val):
        if min_val is not None and value < min_val:
            return min_val
        elif max_val is not None and value > max_val:
            return max_val
        else:
            return value

    def save(self):
        directory = os.path.dirname(os.path.abspath(self.path))
        if not os.path.exists(directory):
            os.makedirs(directory)
        with open(self.path, "w") as file_out:
            self.config.write(file_out)
