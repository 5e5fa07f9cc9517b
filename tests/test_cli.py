import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from utils import app_config
from utils.cli import apply_args, parse_args
from utils.constants import DEFAULT_API_BASE_URL


class TestCli(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        patcher = patch.object(app_config, "CONFIG_FILE", Path(self._tmp.name) / "config.json")
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self._tmp.cleanup)

    def test_no_arguments_leave_config_alone(self):
        apply_args(parse_args([]))
        self.assertEqual(app_config.load_config(), {})

    def test_api_url_is_saved(self):
        apply_args(parse_args(["--api-url", "https://budget.example.com/"]))
        self.assertEqual(app_config.get_api_base_url(), "https://budget.example.com")

    def test_reset_api_url(self):
        apply_args(parse_args(["--api-url", "https://budget.example.com"]))
        apply_args(parse_args(["--reset-api-url"]))
        self.assertEqual(app_config.get_api_base_url(), DEFAULT_API_BASE_URL)

    def test_api_url_and_reset_are_exclusive(self):
        with patch("sys.stderr"), self.assertRaises(SystemExit):
            parse_args(["--api-url", "http://x", "--reset-api-url"])


if __name__ == "__main__":
    unittest.main()
