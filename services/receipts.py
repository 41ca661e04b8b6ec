"""Receipt service for rendering account statements and writing them to disk."""

from datetime import datetime
from typing import Callable, List

from config import Config
from logger import get_logger
from models.account import Account
from models.transaction import TIMESTAMP_FORMAT, format_amount

logger = get_logger()

RECEIPT_HEADER = "------ Ticket Bancario ------"
RECEIPT_TRANSACTIONS = "------ Transacciones ------"
RECEIPT_FOOTER = "------ Fin del Ticket ------"
HISTORY_HEADER = "--- Historial de Transacciones ---"


class ReceiptService:
    """Service for formatting and saving account receipts."""

    def __init__(self, config: Config, clock: Callable[[], datetime]):
        """Initialize the receipt service.

        Args:
            config: Config providing the receipt directory.
            clock: Callable returning the current time, used for the receipt date.
        """
        self.config = config
        self.clock = clock

    def history_lines(self, account: Account) -> List[str]:
        """Format each history record of account, oldest first."""
        return [record.format_line() for record in account.history]

    def render_history(self, account: Account) -> str:
        """Render the on-screen transaction history listing."""
        return "\n".join([HISTORY_HEADER] + self.history_lines(account))

    def render(self, account: Account) -> str:
        """Render a receipt for account's current balance and history.

        Returns:
            Receipt text bounded by the header and footer banners, without a
            trailing newline.
        """
        lines = [
            RECEIPT_HEADER,
            f"Fecha: {self.clock().strftime(TIMESTAMP_FORMAT)}",
            f"Titular: {account.owner}",
            f"Saldo Actual: {format_amount(account.balance)}",
            RECEIPT_TRANSACTIONS,
        ]
        lines.extend(self.history_lines(account))
        lines.append(RECEIPT_FOOTER)
        return "\n".join(lines)

    def write(self, filename: str, content: str) -> bool:
        """Write content to filename inside the receipt directory.

        The file is created or truncated. I/O failures are logged, not raised.

        Args:
            filename: Name of the receipt file.
            content: Text to write.

        Returns:
            True if the file was written, False otherwise.
        """
        path = self.config.receipt_dir / filename
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            logger.error(f"Error saving receipt to {path}: {e}")
            return False

        logger.info(f"Receipt saved to {path}")
        return True

