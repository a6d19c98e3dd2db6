import pytest

from ds4report.data import constants
from ds4report.data.config import Config
from ds4report.data.config_device import ConfigDevice


def test_defaults(tmp_path):
    ConfigDevice.load(str(tmp_path / "device.conf"))
    assert ConfigDevice.vendor_id == constants.VENDOR_ID_SONY
    assert ConfigDevice.product_id == constants.PRODUCT_ID_DS4
    assert ConfigDevice.poll_interval == 0
    assert ConfigDevice.read_timeout == pytest.approx(1.)
    assert ConfigDevice.max_retries == 5
    assert ConfigDevice.retry_backoff == pytest.approx(0.05)


def test_save_and_reload(tmp_path):
    path = tmp_path / "nested" / "device.conf"
    ConfigDevice.load(str(path))
    ConfigDevice.save()
    assert path.exists()
    text = path.read_text()
    assert "[DEVICE]" in text
    assert "interval_ms = 0" in text
    ConfigDevice.load(str(path))
    assert ConfigDevice.vendor_id == constants.VENDOR_ID_SONY


def test_configured_values(tmp_path):
    path = tmp_path / "device.conf"
    path.write_text("[DEVICE]\nvendor_id = 0x1234\nproduct_id = 42\n"
                    "[POLLING]\ninterval_ms = 20\nmax_retries = 1000\nread_timeout_ms = nope\n")
    ConfigDevice.load(str(path))
    assert ConfigDevice.vendor_id == 0x1234
    assert ConfigDevice.product_id == 42
    assert ConfigDevice.poll_interval == pytest.approx(0.02)
    assert ConfigDevice.max_retries == 100
    assert ConfigDevice.read_timeout == pytest.approx(1.)


def test_min_max():
    assert Config.get_min_max(5, 0, 10) == 5
    assert Config.get_min_max(-1, 0, 10) == 0
    assert Config.get_min_max(11, 0, 10) == 10
    assert Config.get_min_max(11, None, None) == 11
