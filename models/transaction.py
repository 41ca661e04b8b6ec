from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_amount(amount: Decimal) -> str:
    """Format an amount in plain notation without trailing zeros.

    Examples: Decimal("1200.00") -> "1200", Decimal("-12.50") -> "-12.5".
    """
    if amount == 0:
        return "0"
    return format(amount.normalize(), "f")


@dataclass(frozen=True)
class TransactionRecord:
    timestamp: datetime
    description: str
    amount: Decimal  # positive for credits, negative for debits

    def format_line(self) -> str:
        """Format the record as a single history/receipt line."""
        return (
            f"{self.timestamp.strftime(TIMESTAMP_FORMAT)}: "
            f"{self.description} - Monto: {format_amount(self.amount)}"
        )

