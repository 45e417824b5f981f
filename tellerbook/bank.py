"""A bank holding savings, checking and business accounts."""

from __future__ import annotations

from collections.abc import Iterator

from tellerbook.accounts import (
    Account,
    BusinessAccount,
    CheckingAccount,
    SavingsAccount,
)


class Bank:
    """Keeps accounts grouped by kind; lookups search savings, checking, business."""

    def __init__(self) -> None:
        self._savings: list[SavingsAccount] = []
        self._checking: list[CheckingAccount] = []
        self._business: list[BusinessAccount] = []

    def _groups(self) -> Iterator[tuple[str, list]]:
        yield "Savings", self._savings
        yield "Checking", self._checking
        yield "Business", self._business

    def add_savings_account(
        self,
        account_id: int,
        name: str,
        balance: float,
        interest_rate: float = 0.02,
        minimum_balance: float = 100.0,
    ) -> SavingsAccount:
        account = SavingsAccount(account_id, name, balance, interest_rate, minimum_balance)
        self._savings.append(account)
        return account

    def add_checking_account(
        self,
        account_id: int,
        name: str,
        balance: float,
        overdraft_limit: float = 500.0,
        monthly_fee: float = 10.0,
    ) -> CheckingAccount:
        account = CheckingAccount(account_id, name, balance, overdraft_limit, monthly_fee)
        self._checking.append(account)
        return account

    def add_business_account(
        self,
        account_id: int,
        name: str,
        balance: float,
        transaction_fee: float = 2.0,
        free_transaction_limit: int = 50,
    ) -> BusinessAccount:
        account = BusinessAccount(
            account_id, name, balance, transaction_fee, free_transaction_limit
        )
        self._business.append(account)
        return account

    def find_account_index(self, account_id: int) -> int | None:
        """Position of the account among savings accounts only, or None."""
        return next(
            (i for i, acc in enumerate(self._savings) if acc.account_id == account_id),
            None,
        )

    def accounts(self) -> list[Account]:
        """All accounts: savings first, then checking, then business."""
        return [*self._savings, *self._checking, *self._business]

    def find_by_id(self, account_id: int) -> Account | None:
        return next(
            (acc for acc in self.accounts() if acc.account_id == account_id), None
        )

    def find_by_name(self, name: str) -> list[Account]:
        return [acc for acc in self.accounts() if acc.name == name]

    def deposit(self, account_id: int, amount: float) -> bool:
        """Deposit into the account; False only if no such account exists."""
        account = self.find_by_id(account_id)
        if account is None:
            return False
        account.deposit(amount)
        return True

    def withdraw(self, account_id: int, amount: float) -> bool:
        account = self.find_by_id(account_id)
        if account is None:
            return False
        return account.withdraw(amount)

    def describe_all(self) -> str:
        lines = ["", "=== All Accounts ===", "-------------------"]
        for label, group in self._groups():
            lines += ["", f"{label} Accounts:"]
            lines += [acc.describe() for acc in group]
        return "\n".join(lines) + "\n"

    def apply_monthly_operations_to_all(self) -> str:
        """Run month-end processing on every account and return a report."""
        lines = ["", "=== Applying Monthly Operations ==="]
        for label, group in self._groups():
            lines += ["", f"{label} Accounts:"]
            for acc in group:
                note = acc.apply_monthly_operations()
                lines.append(f"Account {acc.account_id}: {note or ''}")
        return "\n".join(lines) + "\n"

    def clear(self) -> None:
        for _, group in self._groups():
            group.clear()