"""Shared pytest fixtures for all tests."""

from datetime import datetime, timedelta

import pytest

from config import Config
from models.account import Account
from services.base import Services


class FakeClock:
    """Deterministic clock advancing one second per call."""

    def __init__(self, start=datetime(2024, 3, 1, 9, 30, 0)):
        self.current = start

    def __call__(self):
        now = self.current
        self.current = now + timedelta(seconds=1)
        return now


@pytest.fixture
def clock():
    """Create a deterministic clock starting at 2024-03-01 09:30:00.

    Returns:
        FakeClock: Callable returning successive timestamps.
    """
    return FakeClock()


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration pointing to a temporary directory.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.

    Returns:
        Config: Test configuration object.
    """
    return Config(
        base_dir=tmp_path / "banksim",
        log_level="DEBUG",
        log_dir=tmp_path / "banksim" / "logs",
        receipt_dir=tmp_path / "banksim" / "receipts",
        receipt_filename="ticket_cuenta1.txt",
    )


@pytest.fixture
def services(test_config, clock):
    """Create a Services container with a deterministic clock.

    Returns:
        Services: Services container for testing.
    """
    return Services(test_config, clock=clock)


@pytest.fixture
def account(clock):
    """Create an unlocked account with a balance of 1000."""
    return Account("Juan Perez", "secret", 1000, clock=clock)


@pytest.fixture
def other_account(clock):
    """Create a second account with a balance of 500."""
    return Account("Maria Gonzalez", "other", 500, clock=clock)
