import os
import unittest
from unittest.mock import patch
from throttlevis.core.config import DEFAULT_BASE_URL, VisualizerConfig
from throttlevis.__main__ import build_parser

class TestVisualizerConfig(unittest.TestCase):
    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = VisualizerConfig.from_env()
        self.assertEqual(config.base_url, DEFAULT_BASE_URL)
        self.assertEqual(config.tick_interval, 0.1)
        self.assertEqual(config.history_size, 50)

    def test_env_and_overrides(self):
        env = {"THROTTLEVIS_BASE_URL": "http://limiter:9000", "THROTTLEVIS_TICK_INTERVAL": "0.25"}
        with patch.dict(os.environ, env, clear=True):
            config = VisualizerConfig.from_env(log_level="DEBUG", base_url=None)
        self.assertEqual(config.base_url, "http://limiter:9000")
        self.assertEqual(config.tick_interval, 0.25)
        self.assertEqual(config.log_level, "DEBUG")

    def test_cli_arguments(self):
        args = build_parser().parse_args(["--algorithm", "leaky-bucket", "--capacity", "5", "--rate", "1.5"])
        self.assertEqual(args.algorithm, "leaky-bucket")
        self.assertEqual(args.capacity, 5)
        self.assertEqual(args.rate, 1.5)
        self.assertIsNone(args.base_url)

if __name__ == '__main__':
    unittest.main()
