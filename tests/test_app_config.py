import json
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from utils import app_config
from utils.constants import DEFAULT_API_BASE_URL, DEFAULT_REQUEST_TIMEOUT


class TestAppConfig(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.config_file = Path(self._tmp.name) / "nested" / "config.json"
        patcher = patch.object(app_config, "CONFIG_FILE", self.config_file)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self._tmp.cleanup)

    def test_missing_file_gives_defaults(self):
        self.assertEqual(app_config.load_config(), {})
        self.assertEqual(app_config.get_api_base_url(), DEFAULT_API_BASE_URL)
        self.assertEqual(app_config.get_request_timeout(), DEFAULT_REQUEST_TIMEOUT)
        self.assertEqual(app_config.get_appearance_mode(), "system")
        self.assertEqual(app_config.get_log_level(), "INFO")

    def test_corrupt_file_is_ignored(self):
        self.config_file.parent.mkdir(parents=True)
        self.config_file.write_text("{not json", encoding="utf-8")
        self.assertEqual(app_config.load_config(), {})

    def test_set_base_url_round_trips(self):
        app_config.set_api_base_url("https://budget.example.com/")
        self.assertEqual(app_config.get_api_base_url(), "https://budget.example.com")
        self.assertFalse(self.config_file.with_suffix(".tmp").exists())

        app_config.set_api_base_url(None)
        self.assertEqual(app_config.get_api_base_url(), DEFAULT_API_BASE_URL)

    def test_timeout_null_disables(self):
        app_config.save_config({"request_timeout": None})
        self.assertIsNone(app_config.get_request_timeout())
        app_config.save_config({"request_timeout": "abc"})
        self.assertEqual(app_config.get_request_timeout(), DEFAULT_REQUEST_TIMEOUT)
        app_config.save_config({"request_timeout": 2})
        self.assertEqual(app_config.get_request_timeout(), 2.0)

    def test_unknown_log_level_falls_back(self):
        self.config_file.parent.mkdir(parents=True)
        self.config_file.write_text(json.dumps({"log_level": "chatty"}), encoding="utf-8")
        self.assertEqual(app_config.get_log_level(), "INFO")


if __name__ == "__main__":
    unittest.main()
