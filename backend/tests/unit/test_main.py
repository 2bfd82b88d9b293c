"""
Unit tests for the bot entry point (main.py)
"""

import unittest
from unittest.mock import Mock, patch

import main
from notifications.discord_client import DiscordError
from tests.fixtures.mock_helpers import create_test_settings


class TestInitialize(unittest.TestCase):
    """Tests for initialize() and main()"""

    @patch("main.JobDispatcher")
    @patch("main.load_settings")
    def test_logs_in_and_returns_dispatcher(self, mock_settings, mock_dispatcher):
        mock_settings.return_value = create_test_settings(channel_bindings={"senior": "111"})
        dispatcher = mock_dispatcher.return_value
        dispatcher.discord.fetch_current_user.return_value = {
            "username": "JobRadar",
            "discriminator": "0",
        }

        result = main.initialize()

        self.assertIs(result, dispatcher)
        dispatcher.discord.fetch_current_user.assert_called_once()

    @patch("main.load_settings")
    def test_requires_bot_token(self, mock_settings):
        mock_settings.return_value = create_test_settings(discord_bot_token=None)

        with self.assertRaises(ValueError):
            main.initialize()

    @patch("main.start_job_posting_schedule")
    @patch("main.initialize")
    def test_main_starts_schedule(self, mock_init, mock_start):
        main.main()

        mock_start.assert_called_once_with(mock_init.return_value)

    @patch("main.start_job_posting_schedule")
    @patch("main.initialize", side_effect=DiscordError("401 Unauthorized"))
    def test_main_exits_on_login_failure(self, _init, mock_start):
        with self.assertRaises(SystemExit) as ctx:
            main.main()

        self.assertEqual(ctx.exception.code, 1)
        mock_start.assert_not_called()


if __name__ == "__main__":
    unittest.main()
