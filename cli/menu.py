#!/usr/bin/env python3

from decimal import Decimal, InvalidOperation
from models.errors import BankError
from models.transaction import format_amount
from logger import get_logger

logger = get_logger()

MENU = """
--- Menu ---
1. Deposit
2. Withdraw
3. Transfer funds
4. Check balance
5. View transaction history
6. Change password
7. Lock/Unlock account
8. Print receipt
0. Exit"""


def parse_amount(text: str) -> Decimal:
    """Parse a user-entered amount.

    Raises:
        ValueError: If text is not a finite number.
    """
    try:
        amount = Decimal(text.strip())
    except InvalidOperation:
        raise ValueError(f"'{text.strip()}' is not a valid amount.")
    if not amount.is_finite():
        raise ValueError(f"'{text.strip()}' is not a valid amount.")
    return amount


def read_amount(prompt: str):
    """Prompt for an amount, logging an error and returning None if invalid."""
    try:
        return parse_amount(input(prompt))
    except ValueError as e:
        logger.error(f"Error: {e}")
        return None


def cmd_deposit(args, services):
    """Deposit into the primary account."""
    amount = read_amount("Enter the deposit amount: ")
    if amount is None:
        return

    account = services.accounts.primary
    try:
        services.accounts.deposit(account, amount)
    except BankError as e:
        logger.error(f"Error: {e}")
        return
    print(f"Deposit successful. New balance: {format_amount(account.balance)}")


def cmd_withdraw(args, services):
    """Withdraw from the primary account."""
    amount = read_amount("Enter the withdrawal amount: ")
    if amount is None:
        return

    account = services.accounts.primary
    if services.accounts.withdraw(account, amount):
        print(f"Withdrawal successful. New balance: {format_amount(account.balance)}")
    else:
        print(
            "The withdrawal could not be completed. "
            "Check the balance and that the account is not locked."
        )


def cmd_transfer(args, services):
    """Transfer from the primary to the secondary account."""
    amount = read_amount("Enter the transfer amount: ")
    if amount is None:
        return

    accounts = services.accounts
    if accounts.transfer(amount):
        print(
            "Transfer successful. "
            f"New balance for {accounts.primary.owner}: "
            f"{format_amount(accounts.primary.balance)}, "
            f"new balance for {accounts.secondary.owner}: "
            f"{format_amount(accounts.secondary.balance)}"
        )
    else:
        print(
            "The transfer could not be completed. "
            f"Check the balance and that {accounts.primary.owner}'s account "
            "is not locked."
        )


def cmd_balance(args, services):
    """Show the primary account balance."""
    account = services.accounts.primary
    print(f"Current balance for {account.owner}: {format_amount(account.balance)}")


def cmd_history(args, services):
    """Show the primary account transaction history."""
    print()
    print(services.receipts.render_history(services.accounts.primary))


def cmd_change_password(args, services):
    """Change the primary account password."""
    old_password = input("Enter the current password: ")
    new_password = input("Enter the new password: ")

    try:
        services.accounts.change_password(
            services.accounts.primary, new_password, old_password
        )
    except BankError as e:
        logger.error(f"Error: {e}")
        return
    print("Password changed successfully.")


def cmd_lock(args, services):
    """Lock the primary account, or unlock it if already locked."""
    account = services.accounts.primary
    if account.is_locked():
        services.accounts.unlock(account)
        print("Account unlocked successfully.")
        return

    password = input("Enter the current password: ")
    if services.accounts.lock(account, password):
        print("Account locked successfully.")
    else:
        print("The account could not be locked. Check the password.")


def cmd_receipt(args, services):
    """Print a receipt for the primary account and save it to a file."""
    content = services.receipts.render(services.accounts.primary)
    print(content)

    filename = args.receipt_file
    if services.receipts.write(filename, content):
        print(f"Receipt saved successfully to {filename}.")


MENU_COMMANDS = {
    1: cmd_deposit,
    2: cmd_withdraw,
    3: cmd_transfer,
    4: cmd_balance,
    5: cmd_history,
    6: cmd_change_password,
    7: cmd_lock,
    8: cmd_receipt,
}


def run(args, services):
    """Run the interactive menu until the user chooses 0 or input ends."""
    while True:
        print(MENU)
        try:
            choice = input("Enter your option: ").strip()
        except EOFError:
            print()
            break

        try:
            option = int(choice)
        except ValueError:
            option = None

        if option == 0:
            break

        command = MENU_COMMANDS.get(option)
        if command is None:
            print("Invalid option. Please try again.")
            continue

        try:
            command(args, services)
        except EOFError:
            print()
            break

    print("Exiting the program. Goodbye!")
