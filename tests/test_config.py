"""Tests for configuration classes."""

import os
import pytest
from unittest.mock import patch


class TestGameConfig:
    """Tests for GameConfig class."""

    def test_game_defaults(self):
        """No seed and a hidden hole card by default."""
        with patch.dict(os.environ, {}, clear=True):
            from config import GameConfig

            config = GameConfig()

            assert config.seed is None
            assert config.reveal_hole_card is False

    def test_seed_from_env(self):
        with patch.dict(os.environ, {"BLACKJACK_SEED": " 1234 "}):
            from config import GameConfig

            assert GameConfig().seed == 1234

    def test_blank_seed_is_none(self):
        with patch.dict(os.environ, {"BLACKJACK_SEED": "   "}):
            from config import _parse_seed

            assert _parse_seed() is None

    def test_bad_seed_rejected(self):
        with patch.dict(os.environ, {"BLACKJACK_SEED": "lucky"}):
            from config import _parse_seed

            with pytest.raises(ValueError, match="BLACKJACK_SEED"):
                _parse_seed()

    @pytest.mark.parametrize("value", ["1", "true", "TRUE", "yes", "on"])
    def test_reveal_hole_card_enabled(self, value):
        with patch.dict(os.environ, {"BLACKJACK_REVEAL_HOLE_CARD": value}):
            from config import GameConfig

            assert GameConfig().reveal_hole_card is True

    @pytest.mark.parametrize("value", ["0", "false", "no", ""])
    def test_reveal_hole_card_disabled(self, value):
        with patch.dict(os.environ, {"BLACKJACK_REVEAL_HOLE_CARD": value}):
            from config import GameConfig

            assert GameConfig().reveal_hole_card is False


class TestLoggingConfig:
    """Tests for LoggingConfig class."""

    def test_logging_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            from config import LoggingConfig

            config = LoggingConfig()

            assert config.level == "WARNING"
            assert "%(levelname)s" in config.format

    def test_level_is_uppercased(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}):
            from config import LoggingConfig

            assert LoggingConfig().level == "DEBUG"

    def test_apply_configures_root_logger(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "info", "LOG_FORMAT": "%(message)s"}):
            from config import LoggingConfig

            config = LoggingConfig()

        with patch("logging.basicConfig") as basic_config:
            config.apply()

        basic_config.assert_called_once_with(level="INFO", format="%(message)s")


class TestAppConfig:
    """Tests for AppConfig class."""

    def test_app_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            from config import AppConfig

            config = AppConfig()

            assert config.debug is False
            assert config.window_title == "Blackjack"
            assert config.game.seed is None
            assert config.logging.level == "WARNING"

    def test_debug_flag(self):
        with patch.dict(os.environ, {"DEBUG": "true"}):
            from config import AppConfig

            assert AppConfig().debug is True

    def test_config_is_frozen(self):
        from config import AppConfig

        config = AppConfig()
        with pytest.raises(AttributeError):
            config.debug = True
