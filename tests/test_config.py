"""Tests for configuration loading and logging setup."""

import logging
import sys
import tomllib
from datetime import date
from pathlib import Path

import pytest

import config as config_module
from config import Config, get_config_path, load_config
from logger import get_logger, log_file_path, setup_logging


@pytest.fixture
def fake_home(tmp_path, monkeypatch):
    """Point Path.home() at a temporary directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: home))
    return home


class TestLoadConfig:
    """Tests for load_config."""

    def test_config_path(self, fake_home):
        """Test that the config file lives under ~/.config."""
        assert get_config_path() == fake_home / ".config" / "banksim.toml"

    def test_creates_default_config(self, fake_home):
        """Test that a missing config file is created with defaults."""
        config = load_config()

        assert config == Config.default()
        assert config.base_dir == fake_home / "data" / "banksim"
        assert config.receipt_filename == "ticket_cuenta1.txt"
        assert config.receipt_dir == fake_home / "data" / "banksim" / "receipts"

        with open(get_config_path(), "rb") as f:
            data = tomllib.load(f)
        assert data["logging"]["level"] == "INFO"
        assert data["receipts"]["filename"] == "ticket_cuenta1.txt"

    def test_reads_existing_config(self, fake_home, tmp_path):
        """Test that values from an existing file are used."""
        config_path = get_config_path()
        config_path.parent.mkdir(parents=True)
        config_path.write_text(
            f'base_dir = "{tmp_path / "custom"}"\n'
            "[logging]\n"
            'level = "DEBUG"\n'
            "[receipts]\n"
            'filename = "receipt.txt"\n'
        )

        config = load_config()

        assert config.base_dir == tmp_path / "custom"
        assert config.log_level == "DEBUG"
        assert config.log_dir == tmp_path / "custom" / "logs"
        assert config.receipt_dir == tmp_path / "custom" / "receipts"
        assert config.receipt_filename == "receipt.txt"

    def test_round_trip_default(self, fake_home):
        """Test that a written default config loads back unchanged."""
        first = load_config()
        second = load_config()

        assert first == second

    def test_write_config_creates_directory(self, fake_home):
        """Test that _write_config creates ~/.config if needed."""
        config_module._write_config(Config.default())

        assert get_config_path().exists()


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_setup_logging_handlers(self, test_config):
        """Test that file and console handlers are attached."""
        logger = setup_logging(test_config)
        try:
            assert logger is get_logger()
            assert logger.level == logging.DEBUG
            assert len(logger.handlers) == 2
            assert any(
                isinstance(h, logging.FileHandler) for h in logger.handlers
            )
            assert test_config.log_dir.exists()
            assert list(test_config.log_dir.glob("banksim-*.log"))
        finally:
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()
            logger.setLevel(logging.NOTSET)

    def test_setup_logging_is_idempotent(self, test_config):
        """Test that calling setup twice does not duplicate handlers."""
        setup_logging(test_config)
        logger = setup_logging(test_config)
        try:
            assert len(logger.handlers) == 2
        finally:
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()
            logger.setLevel(logging.NOTSET)

    def test_log_file_path(self, tmp_path):
        """Test the dated log file name."""
        assert log_file_path(tmp_path, date(2024, 3, 1)) == (
            tmp_path / "banksim-2024-03-01.log"
        )

    def test_records_reach_file_and_stderr(self, test_config):
        """Test that the file handler writes records and the console uses stderr."""
        logger = setup_logging(test_config)
        try:
            console = [
                h for h in logger.handlers if not isinstance(h, logging.FileHandler)
            ]
            assert console[0].stream is sys.stderr

            logger.info("receipt written")
            for handler in logger.handlers:
                handler.flush()

            text = log_file_path(test_config.log_dir).read_text(encoding="utf-8")
            assert "banksim - INFO - receipt written" in text
        finally:
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()
            logger.setLevel(logging.NOTSET)
