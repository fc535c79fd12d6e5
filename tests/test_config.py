import os
import unittest
from unittest.mock import patch

from fitcheck.core.config import _get_env_bool, _get_env_float, _get_env_int, _get_env_list, load_settings


class ConfigTests(unittest.TestCase):
    def test_env_helpers_fall_back_on_blank_or_invalid(self):
        with patch.dict(os.environ, {"X_BOOL": "", "X_INT": "abc", "X_FLOAT": "fast", "X_LIST": " , "}):
            self.assertTrue(_get_env_bool("X_BOOL", True))
            self.assertEqual(_get_env_int("X_INT", 7), 7)
            self.assertEqual(_get_env_float("X_FLOAT", 1.5), 1.5)
            self.assertEqual(_get_env_list("X_LIST", ["*"]), ("*",))

    def test_env_helpers_parse_values(self):
        with patch.dict(os.environ, {"X_BOOL": "off", "X_INT": "42", "X_FLOAT": "2.5", "X_LIST": "a, b,,c"}):
            self.assertFalse(_get_env_bool("X_BOOL", True))
            self.assertEqual(_get_env_int("X_INT", 7), 42)
            self.assertEqual(_get_env_float("X_FLOAT", 1.5), 2.5)
            self.assertEqual(_get_env_list("X_LIST", ["*"]), ("a", "b", "c"))

    def test_load_settings_defaults(self):
        cleared = {
            name: ""
            for name in (
                "PORT",
                "OPENAI_MODEL",
                "OPENAI_TIMEOUT_S",
                "RATE_LIMIT",
                "ACCESS_POLICY_ENABLED",
                "API_KEY",
                "OPENAI_API_KEY",
                "MAX_TEXT_CHARS",
            )
        }
        with patch.dict(os.environ, cleared):
            loaded = load_settings()
        self.assertEqual(loaded.port, 4000)
        self.assertEqual(loaded.openai_model, "gpt-4o-mini")
        self.assertEqual(loaded.openai_timeout_s, 30.0)
        self.assertEqual(loaded.rate_limit, "120/minute")
        self.assertTrue(loaded.access_policy_enabled)
        self.assertIsNone(loaded.api_key)
        self.assertIsNone(loaded.openai_api_key)
        self.assertEqual(loaded.max_text_chars, 0)


if __name__ == "__main__":
    unittest.main()
