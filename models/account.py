from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional, Tuple, Union

from models.credential import Credential
from models.errors import InvalidAmount, InvalidCredential
from models.transaction import TransactionRecord

Amount = Union[Decimal, int, float, str]


def to_decimal(value: Amount) -> Decimal:
    """Coerce an amount to Decimal, going through str() for floats."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


class Account:
    """A bank account with balance, password lock and transaction history.

    Every balance change appends exactly one TransactionRecord to this
    account's history (one per side for transfers).

    Args:
        owner: Account holder's name.
        password: Password used to lock the account and change credentials.
        initial_balance: Opening balance. Not recorded in history.
        clock: Callable returning the current time, used to timestamp records.
    """

    def __init__(
        self,
        owner: str,
        password: str,
        initial_balance: Amount = Decimal("0"),
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.owner = owner
        self._credential = Credential(password)
        self._balance = to_decimal(initial_balance)
        self._locked = False
        self._history = []
        self._clock = clock or datetime.now

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def history(self) -> Tuple[TransactionRecord, ...]:
        return tuple(self._history)

    def is_locked(self) -> bool:
        return self._locked

    def deposit(self, amount: Amount) -> None:
        """Add funds to the account. Allowed while locked.

        Raises:
            InvalidAmount: If amount is zero, negative or not a finite number.
        """
        amount = to_decimal(amount)
        if not amount.is_finite() or amount <= 0:
            raise InvalidAmount("Deposit amount must be greater than zero.")

        self._balance += amount
        self._record("Deposit", amount)

    def withdraw(self, amount: Amount) -> bool:
        """Remove funds from the account.

        Returns:
            True if the withdrawal happened, False if the account is locked,
            the amount is not positive, or funds are insufficient.
        """
        amount = to_decimal(amount)
        if not self._can_debit(amount):
            return False

        self._balance -= amount
        self._record("Withdrawal", -amount)
        return True

    def transfer(self, target: "Account", amount: Amount) -> bool:
        """Move funds from this account to target.

        Only this account's lock state and balance are checked.

        Returns:
            True if the transfer happened, False otherwise.
        """
        amount = to_decimal(amount)
        if not self._can_debit(amount):
            return False

        self._balance -= amount
        target._balance += amount
        self._record(f"Transfer to {target.owner}", -amount)
        target._record(f"Transfer from {self.owner}", amount)
        return True

    def lock(self, password: str) -> bool:
        """Lock the account if it is unlocked and password matches."""
        if self._locked or not self._credential.verify(password):
            return False
        self._locked = True
        return True

    def unlock(self) -> None:
        """Unlock the account. No password is required."""
        self._locked = False

    def change_password(self, new_password: str, old_password: str) -> None:
        """Replace the account password.

        Raises:
            InvalidCredential: If old_password does not match.
        """
        if not self._credential.verify(old_password):
            raise InvalidCredential("The old password is not valid.")
        self._credential = Credential(new_password)

    def _can_debit(self, amount: Decimal) -> bool:
        if not amount.is_finite():
            return False
        return not self._locked and amount > 0 and self._balance >= amount

    def _record(self, description: str, amount: Decimal) -> None:
        self._history.append(
            TransactionRecord(
                timestamp=self._clock(), description=description, amount=amount
            )
        )

    def __repr__(self) -> str:
        return (
            f"Account(owner={self.owner!r}, balance={self._balance}, "
            f"locked={self._locked})"
        )
