import io
import unittest
from throttlevis.core.types import LogEntry, Severity, Snapshot
from throttlevis.limiter.profile import LEAKY_BUCKET
from throttlevis.presentation import ConsoleAdapter
from tests.helpers import FakeClock

class TestConsoleAdapter(unittest.TestCase):
    def setUp(self):
        self.clock = FakeClock()
        self.stream = io.StringIO()
        self.adapter = ConsoleAdapter(LEAKY_BUCKET, stream=self.stream, min_interval=1.0, width=10)

    def test_format_snapshot(self):
        text = self.adapter.format_snapshot(Snapshot(level=2.5, capacity=5, last_sync_ts=self.clock()))
        self.assertTrue(text.startswith("[#####-----] Current Queue Size: 2.50 / 5 | Last Leak: "))

    def test_render_is_throttled(self):
        self.adapter.render(Snapshot(level=1, capacity=5, last_sync_ts=self.clock()))
        self.adapter.render(Snapshot(level=1, capacity=5, last_sync_ts=self.clock.advance(0.1)))
        self.adapter.render(Snapshot(level=1, capacity=5, last_sync_ts=self.clock.advance(1)))
        self.assertEqual(len(self.stream.getvalue().splitlines()), 2)

    def test_snapshot_after_log_entry_is_always_rendered(self):
        self.adapter.render(Snapshot(level=4, capacity=5, last_sync_ts=self.clock()))
        self.adapter.log(LogEntry(message="Request processed.", severity=Severity.SUCCESS,
                                  timestamp=self.clock()))
        self.adapter.render(Snapshot(level=3, capacity=5, last_sync_ts=self.clock.advance(0.1)))
        self.assertIn("Current Queue Size: 3.00 / 5", self.stream.getvalue())

    def test_header_lists_variant_labels(self):
        text = self.adapter.header(5, 1.5)
        self.assertIn("=== Leaky Bucket Configuration ===", text)
        self.assertIn("simulate request queueing and leaking", text)
        self.assertIn("Bucket Capacity (Requests): 5", text)
        self.assertIn("Leak Rate (Requests/Second): 1.5", text)
        self.assertIn("Configure Leaky Bucket, then Add Request to Queue", text)

    def test_log_line(self):
        self.adapter.log(LogEntry(message="Request processed.", severity=Severity.SUCCESS,
                                  timestamp=self.clock()))
        self.assertRegex(self.stream.getvalue(), r"^\[\d{2}:\d{2}:\d{2}\] SUCCESS Request processed\.\n$")

    def test_fill_percentage_with_zero_capacity(self):
        self.assertEqual(Snapshot(level=0, capacity=0, last_sync_ts=0).fill_percentage, 0.0)

if __name__ == '__main__':
    unittest.main()
