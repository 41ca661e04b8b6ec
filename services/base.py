"""Base services container for dependency injection."""

from datetime import datetime
from typing import Callable, Optional

from config import Config
from services.accounts import AccountService
from services.receipts import ReceiptService


class Services:
    """Container for all application services.

    This class owns the session's accounts (through AccountService) and
    makes it easy to inject a deterministic clock for testing.

    Args:
        config: Application configuration object.
        clock: Optional callable returning the current time. Defaults to
            datetime.now.
    """

    def __init__(self, config: Config, clock: Optional[Callable[[], datetime]] = None):
        self.config = config
        self.clock = clock or datetime.now

        self.accounts = AccountService(self.clock)
        self.receipts = ReceiptService(config, self.clock)
