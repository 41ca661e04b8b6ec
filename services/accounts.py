"""Account service owning the session's accounts."""

from datetime import datetime
from decimal import Decimal
from typing import Callable

from logger import get_logger
from models.account import Account, Amount
from models.errors import InvalidAmount, InvalidCredential

logger = get_logger()

PRIMARY_OWNER = "Juan Perez"
PRIMARY_PASSWORD = "contrasena_segura"
PRIMARY_BALANCE = Decimal("1000")

SECONDARY_OWNER = "Maria Gonzalez"
SECONDARY_PASSWORD = "otra_contrasena"
SECONDARY_BALANCE = Decimal("500")


class AccountService:
    """Service for operating on the two session accounts.

    The primary account is the one the menu acts on; transfers always go
    from primary to secondary.
    """

    def __init__(self, clock: Callable[[], datetime]):
        """Create the session accounts.

        Args:
            clock: Callable returning the current time, shared by both accounts.
        """
        self.primary = Account(PRIMARY_OWNER, PRIMARY_PASSWORD, PRIMARY_BALANCE, clock)
        self.secondary = Account(
            SECONDARY_OWNER, SECONDARY_PASSWORD, SECONDARY_BALANCE, clock
        )

    def deposit(self, account: Account, amount: Amount) -> None:
        """Deposit into account.

        Raises:
            InvalidAmount: If amount is zero or negative.
        """
        try:
            account.deposit(amount)
        except InvalidAmount:
            logger.warning(f"Rejected deposit of {amount} to {account.owner}")
            raise
        logger.debug(f"Deposit of {amount} to {account.owner}")

    def withdraw(self, account: Account, amount: Amount) -> bool:
        """Withdraw from account. Returns False if it was refused."""
        if not account.withdraw(amount):
            logger.warning(f"Refused withdrawal of {amount} from {account.owner}")
            return False
        logger.debug(f"Withdrawal of {amount} from {account.owner}")
        return True

    def transfer(self, amount: Amount) -> bool:
        """Transfer amount from the primary to the secondary account."""
        if not self.primary.transfer(self.secondary, amount):
            logger.warning(
                f"Refused transfer of {amount} from {self.primary.owner} "
                f"to {self.secondary.owner}"
            )
            return False
        logger.debug(
            f"Transfer of {amount} from {self.primary.owner} to {self.secondary.owner}"
        )
        return True

    def lock(self, account: Account, password: str) -> bool:
        """Lock account if password matches. Returns False otherwise."""
        if not account.lock(password):
            logger.warning(f"Refused lock of {account.owner}")
            return False
        logger.info(f"Account of {account.owner} locked")
        return True

    def unlock(self, account: Account) -> None:
        account.unlock()
        logger.info(f"Account of {account.owner} unlocked")

    def change_password(
        self, account: Account, new_password: str, old_password: str
    ) -> None:
        """Change account's password.

        Raises:
            InvalidCredential: If old_password does not match.
        """
        try:
            account.change_password(new_password, old_password)
        except InvalidCredential:
            logger.warning(f"Rejected password change for {account.owner}")
            raise
        logger.info(f"Password changed for {account.owner}")
