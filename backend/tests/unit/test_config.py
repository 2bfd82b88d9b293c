"""
Unit tests for shared/config.py
"""

import os
import unittest
from unittest.mock import patch

from shared.config import DispatchSettings, load_settings
from tests.fixtures.mock_helpers import TEST_IV, TEST_KEY

BASE_ENV = {
    "SUPABASE_URL": "https://test.supabase.co",
    "SUPABASE_SERVICE_KEY": "service-key",
    "URL_ENCRYPTION_KEY": TEST_KEY,
    "URL_ENCRYPTION_IV": TEST_IV,
}


class TestLoadSettings(unittest.TestCase):
    """Tests for load_settings()"""

    def _load(self, **extra):
        env = dict(BASE_ENV, **extra)
        with patch.dict(os.environ, env, clear=True):
            return load_settings()

    def test_defaults(self):
        settings = self._load()

        self.assertEqual(settings.database_timeout_seconds, 5.0)
        self.assertEqual(settings.send_interval_seconds, 1.0)
        self.assertEqual(settings.send_timeout_seconds, 10.0)
        self.assertEqual(settings.cron_minute, 1)
        self.assertEqual(settings.timezone, "UTC")
        self.assertEqual(settings.redirect_base_url, "https://jobradar.live")
        self.assertIsNone(settings.discord_bot_token)

    def test_channel_bindings(self):
        settings = self._load(
            DISCORD_CHANNEL_SENIOR="111",
            DISCORD_CHANNEL_EARLY_CAREER="",
            DISCORD_CHANNEL_INTERNSHIPS="444",
        )

        self.assertEqual(
            settings.channel_bindings,
            {
                "senior": "111",
                "early career": None,
                "new grad": None,
                "internship": "444",
            },
        )

    def test_overrides(self):
        settings = self._load(
            DATABASE_TIMEOUT_SECONDS="2.5",
            DISCORD_SEND_INTERVAL_SECONDS="0.5",
            DISPATCH_CRON_MINUTE="15",
            REDIRECT_BASE_URL="https://example.org/",
        )

        self.assertEqual(settings.database_timeout_seconds, 2.5)
        self.assertEqual(settings.send_interval_seconds, 0.5)
        self.assertEqual(settings.cron_minute, 15)
        self.assertEqual(settings.redirect_base_url, "https://example.org")

    def test_missing_supabase_credentials(self):
        env = dict(BASE_ENV)
        del env["SUPABASE_URL"]
        with patch.dict(os.environ, env, clear=True):
            with self.assertRaises(ValueError):
                load_settings()

    def test_missing_key_material(self):
        env = dict(BASE_ENV)
        del env["URL_ENCRYPTION_IV"]
        with patch.dict(os.environ, env, clear=True):
            with self.assertRaises(ValueError):
                load_settings()

    def test_wrong_key_length(self):
        with self.assertRaises(ValueError):
            self._load(URL_ENCRYPTION_KEY="your-secret-key-min-32-chars-long-secure")

    def test_wrong_iv_length(self):
        with self.assertRaises(ValueError):
            self._load(URL_ENCRYPTION_IV="short")

    def test_bad_number(self):
        with self.assertRaises(ValueError):
            self._load(DISCORD_SEND_INTERVAL_SECONDS="soon")

    def test_cron_minute_range(self):
        with self.assertRaises(ValueError):
            self._load(DISPATCH_CRON_MINUTE="75")


class TestDispatchSettings(unittest.TestCase):
    """Tests for DispatchSettings validation"""

    def test_blank_channels_become_none(self):
        settings = DispatchSettings(
            supabase_url="u",
            supabase_service_key="k",
            url_encryption_key=TEST_KEY,
            url_encryption_iv=TEST_IV,
            channel_bindings={"senior": ""},
        )

        self.assertEqual(settings.channel_bindings, {"senior": None})


if __name__ == "__main__":
    unittest.main()
