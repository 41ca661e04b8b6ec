"""Domain errors raised by account operations."""


class BankError(Exception):
    """Base class for account errors reported to the menu."""


class InvalidAmount(BankError, ValueError):
    """Raised when a deposit amount is zero or negative."""


class InvalidCredential(BankError):
    """Raised when the supplied password does not match the account's."""
