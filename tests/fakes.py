from ds4report.data.errors import DeviceDisconnected


class FakeDevice:
    def __init__(self, reads=()):
        """
        Replays a scripted list of reads. Exceptions in the list are raised in place of a report.
        """
        self.reads = list(reads)
        self.read_calls = []
        self.opened = None
        self.closed = False

    def open(self, vendor_id, product_id):
        self.opened = (vendor_id, product_id)

    def read(self, size, timeout=None):
        self.read_calls.append((size, timeout))
        if not self.reads:
            raise DeviceDisconnected("No more scripted reads")
        result = self.reads.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    def close(self):
        self.closed = True
