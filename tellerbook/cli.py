"""Interactive menu-driven front end for the bank."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any, TextIO

from tellerbook import accounts as _accounts_module
from tellerbook.bank import Bank
from tellerbook.storage import DATA_FILE, load_accounts, save_accounts

MENU = """
=== Banking System ===
1. Add Savings Account
2. Add Checking Account
3. Add Business Account
4. Deposit
5. Withdraw
6. Show All Accounts
7. Apply Monthly Operations
8. Save All Accounts
9. Load All Accounts
10. Find Account by ID
11. Find Account by Name
12. Exit
Choose an option: """


class _Input:
    """Whitespace-separated tokens read lazily from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._tokens = self._generate(stream)

    @staticmethod
    def _generate(stream: TextIO) -> Iterator[str]:
        for line in stream:
            yield from line.split()

    def token(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise EOFError from None

    def read(self, *types: Callable[[str], Any]) -> tuple[Any, ...]:
        """Read one value per type; raises ValueError on a bad token."""
        tokens = [self.token() for _ in types]
        return tuple(convert(tok) for convert, tok in zip(types, tokens))


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def _add_savings(bank: Bank, inp: _Input, data_file: Path) -> None:
    _prompt("Enter ID, Name, Initial Balance, Interest Rate (0.02 for 2%), Min Balance: ")
    bank.add_savings_account(*inp.read(int, str, float, float, float))
    print("Savings account added successfully!")


def _add_checking(bank: Bank, inp: _Input, data_file: Path) -> None:
    _prompt("Enter ID, Name, Initial Balance, Overdraft Limit, Monthly Fee: ")
    bank.add_checking_account(*inp.read(int, str, float, float, float))
    print("Checking account added successfully!")


def _add_business(bank: Bank, inp: _Input, data_file: Path) -> None:
    _prompt("Enter ID, Name, Initial Balance, Transaction Fee, Free Transaction Limit: ")
    bank.add_business_account(*inp.read(int, str, float, float, int))
    print("Business account added successfully!")


def _deposit(bank: Bank, inp: _Input, data_file: Path) -> None:
    _prompt("Enter ID and amount to deposit: ")
    account_id, amount = inp.read(int, float)
    if bank.deposit(account_id, amount):
        print("Deposit successful!")
    else:
        print("Account not found.")


def _withdraw(bank: Bank, inp: _Input, data_file: Path) -> None:
    _prompt("Enter ID and amount to withdraw: ")
    account_id, amount = inp.read(int, float)
    if bank.withdraw(account_id, amount):
        print("Withdrawal successful!")
    else:
        print(
            "Account not found, insufficient funds, "
            "or withdrawal violates account rules."
        )


def _show_all(bank: Bank, inp: _Input, data_file: Path) -> None:
    print(bank.describe_all(), end="")


def _monthly(bank: Bank, inp: _Input, data_file: Path) -> None:
    print(bank.apply_monthly_operations_to_all(), end="")


def _save(bank: Bank, inp: _Input, data_file: Path) -> None:
    try:
        save_accounts(bank, data_file)
    except OSError as exc:
        print(f"Error saving accounts: {exc}")
    else:
        print(f"All accounts saved to {data_file}")


def _load(bank: Bank, inp: _Input, data_file: Path) -> None:
    try:
        load_accounts(bank, data_file)
    except FileNotFoundError:
        print("No saved data found. Starting fresh.")
    except (OSError, ValueError) as exc:
        print(f"Error loading accounts: {exc}")
    else:
        print(f"All accounts loaded from {data_file}")


def _find_by_id(bank: Bank, inp: _Input, data_file: Path) -> None:
    _prompt("Enter Account ID to search: ")
    (account_id,) = inp.read(int)
    print(f"\n=== Search Result for ID: {account_id} ===")
    account = bank.find_by_id(account_id)
    if account is None:
        print(f"Account with ID {account_id} not found!")
    else:
        print(account.describe())


def _find_by_name(bank: Bank, inp: _Input, data_file: Path) -> None:
    _prompt("Enter Account Name to search: ")
    (name,) = inp.read(str)
    print(f"\n=== Search Result for Name: {name} ===")
    matches = bank.find_by_name(name)
    for account in matches:
        print(account.describe())
    if not matches:
        print(f"Account with name {name} not found!")


_ACTIONS: dict[int, Callable[[Bank, _Input, Path], None]] = {
    1: _add_savings,
    2: _add_checking,
    3: _add_business,
    4: _deposit,
    5: _withdraw,
    6: _show_all,
    7: _monthly,
    8: _save,
    9: _load,
    10: _find_by_id,
    11: _find_by_name,
}

_EXIT = 12


def _sample_bank() -> Bank:
    bank = Bank()
    bank.add_savings_account(1001, "Alice", 1000.0, 0.03, 50.0)
    bank.add_checking_account(2001, "Bob", 500.0, 300.0, 12.0)
    bank.add_business_account(3001, "CompanyXYZ", 5000.0, 1.5, 100)
    return bank


def _run(bank: Bank, inp: _Input, data_file: Path) -> None:
    while True:
        _prompt(MENU)
        try:
            token = inp.token()
        except EOFError:
            print()
            return
        try:
            choice = int(token)
        except ValueError:
            choice = 0
        if choice == _EXIT:
            print("Thank you for using our banking system!")
            return
        action = _ACTIONS.get(choice)
        if action is None:
            print("Invalid option. Please try again.")
            continue
        try:
            action(bank, inp, data_file)
        except EOFError:
            print()
            return
        except ValueError:
            print("Invalid input. Please try again.")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive banking menu on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="tellerbook", description="Interactive banking system."
    )
    parser.add_argument(
        "--data-file",
        type=Path,
        default=Path(DATA_FILE),
        help=f"file used by the save and load options (default: {DATA_FILE})",
    )
    args = parser.parse_args(argv)

    fee_logger = logging.getLogger(_accounts_module.__name__)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    previous_level = fee_logger.level
    previous_propagate = fee_logger.propagate
    fee_logger.addHandler(handler)
    fee_logger.setLevel(logging.INFO)
    fee_logger.propagate = False

    try:
        bank = _sample_bank()
        print("Welcome to the Enhanced Banking System!")
        print("Sample accounts have been created for demonstration.")
        print("Accounts can be found both by ID and by name!")
        _run(bank, _Input(sys.stdin), args.data_file)
    finally:
        fee_logger.removeHandler(handler)
        fee_logger.setLevel(previous_level)
        fee_logger.propagate = previous_propagate
    return 0


if __name__ == "__main__":
    sys.exit(main())