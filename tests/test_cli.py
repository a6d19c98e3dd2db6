import pytest

from ds4report.data.args import Args
from ds4report.data.config_device import ConfigDevice
from ds4report.data.errors import OpenError, UnrecognizedReportSize
from ds4report.ui.cli.cli_main import CliMain

from fakes import FakeDevice
from reports import LAYOUTS, make_report


class UnpluggedDevice(FakeDevice):
    def open(self, vendor_id, product_id):
        raise OpenError(vendor_id, product_id, "open failed")


@pytest.fixture
def config(tmp_path):
    ConfigDevice.load(str(tmp_path / "device.conf"))


def test_args():
    args = Args.parse_args(["-d", "--vendor-id", "0x054c", "--product-id", "2508", "-n", "5", "-i", "0.01"])
    assert args.debug
    assert args.vendor_id == 0x054c
    assert args.product_id == 2508
    assert args.count == 5
    assert args.interval == 0.01
    assert args.timeout is None


def test_run_count(config):
    Args.parse_args(["-n", "2"])
    report = make_report(LAYOUTS["bluetooth"], face=0x20)
    device = FakeDevice([report] * 3)
    ui = CliMain(device)
    ui.start()
    assert device.opened == (0x054c, 0x09cc)
    assert len(device.read_calls) == 3
    ui.stop()
    assert device.closed


def test_ids_override_config(config):
    Args.parse_args(["-n", "1", "--vendor-id", "0x1234", "--product-id", "0x5678"])
    device = FakeDevice([make_report(LAYOUTS["usb"])] * 2)
    CliMain(device).start()
    assert device.opened == (0x1234, 0x5678)


def test_open_error(config):
    Args.parse_args([])
    with pytest.raises(OpenError):
        CliMain(UnpluggedDevice()).start()


def test_unrecognized_report_size(config):
    Args.parse_args([])
    with pytest.raises(UnrecognizedReportSize):
        CliMain(FakeDevice([bytes(32)])).start()
