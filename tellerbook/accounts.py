"""Account types with their deposit, withdrawal and month-end rules."""

from __future__ import annotations

from abc import ABC, abstractmethod


def _money(value: float) -> str:
    return f"${value:.2f}"


class Account(ABC):
    """A named account holding a balance."""

    def __init__(self, account_id: int, name: str, balance: float) -> None:
        self.account_id = account_id
        self.name = name
        self.balance = balance

    def deposit(self, amount: float) -> None:
        """Add a positive amount; anything else is ignored."""
        if amount > 0:
            self.balance += amount

    def withdraw(self, amount: float) -> bool:
        """Take a positive amount not exceeding the balance."""
        if 0 < amount <= self.balance:
            self.balance -= amount
            return True
        return False

    @property
    @abstractmethod
    def account_type(self) -> str:
        """Human-readable kind of account."""

    @property
    def interest_rate(self) -> float:
        return 0.0

    def apply_monthly_operations(self) -> str | None:
        """Run month-end processing and return a note about it, if any."""
        return None

    def describe(self) -> str:
        return (
            f"ID: {self.account_id}, Name: {self.name}, "
            f"Type: {self.account_type}, Balance: {_money(self.balance)}"
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(account_id={self.account_id!r}, "
            f"name={self.name!r}, balance={self.balance!r})"
        )


class SavingsAccount(Account):
    """Earns monthly interest and must keep a minimum balance."""

    def __init__(
        self,
        account_id: int,
        name: str,
        balance: float,
        interest_rate: float = 0.02,
        minimum_balance: float = 100.0,
    ) -> None:
        super().__init__(account_id, name, balance)
        self._interest_rate = interest_rate
        self.minimum_balance = minimum_balance

    @property
    def account_type(self) -> str:
        return "Savings"

    @property
    def interest_rate(self) -> float:
        return self._interest_rate

    def withdraw(self, amount: float) -> bool:
        if amount > 0 and self.balance - amount >= self.minimum_balance:
            self.balance -= amount
            return True
        return False

    def apply_monthly_operations(self) -> str:
        interest = self.balance * self._interest_rate / 12
        self.balance += interest
        return f"Interest applied: {_money(interest)}"

    def describe(self) -> str:
        return (
            f"{super().describe()}, Interest Rate: {self._interest_rate * 100:.2f}%"
            f", Min Balance: {_money(self.minimum_balance)}"
        )


class CheckingAccount(Account):
    """Allows an overdraft and charges a monthly fee."""

    def __init__(
        self,
        account_id: int,
        name: str,
        balance: float,
        overdraft_limit: float = 500.0,
        monthly_fee: float = 10.0,
    ) -> None:
        super().__init__(account_id, name, balance)
        self.overdraft_limit = overdraft_limit
        self.monthly_fee = monthly_fee
        self.transaction_count = 0

    @property
    def account_type(self) -> str:
        return "Checking"

    def deposit(self, amount: float) -> None:
        super().deposit(amount)
        if amount > 0:
            self.transaction_count += 1

    def withdraw(self, amount: float) -> bool:
        if amount > 0 and self.balance - amount >= -self.overdraft_limit:
            self.balance -= amount
            self.transaction_count += 1
            return True
        return False

    def apply_monthly_operations(self) -> str:
        self.balance -= self.monthly_fee
        self.transaction_count = 0
        return f"Monthly fee applied: {_money(self.monthly_fee)}"

    def describe(self) -> str:
        return (
            f"{super().describe()}, Overdraft Limit: {_money(self.overdraft_limit)}"
            f", Monthly Fee: {_money(self.monthly_fee)}"
            f", Transactions: {self.transaction_count}"
        )


class BusinessAccount(Account):
    """Charges a fee per transaction once the free allowance is used up.

    Each charged fee adds a line to ``notices``.
    """

    def __init__(
        self,
        account_id: int,
        name: str,
        balance: float,
        transaction_fee: float = 2.0,
        free_transaction_limit: int = 50,
    ) -> None:
        super().__init__(account_id, name, balance)
        self.transaction_fee = transaction_fee
        self.free_transaction_limit = free_transaction_limit
        self.transaction_count = 0
        self.notices: list[str] = []

    @property
    def account_type(self) -> str:
        return "Business"

    def deposit(self, amount: float) -> None:
        if amount > 0:
            self.balance += amount
            self.transaction_count += 1
            if self.transaction_count > self.free_transaction_limit:
                self.balance -= self.transaction_fee
                self.notices.append(
                    f"Transaction fee applied: {_money(self.transaction_fee)}"
                )

    def withdraw(self, amount: float) -> bool:
        total = amount
        if self.transaction_count >= self.free_transaction_limit:
            total += self.transaction_fee
        if 0 < total <= self.balance:
            self.balance -= total
            self.transaction_count += 1
            if self.transaction_count > self.free_transaction_limit:
                self.notices.append(
                    f"Transaction fee applied: {_money(self.transaction_fee)}"
                )
            return True
        return False

    def apply_monthly_operations(self) -> str:
        self.transaction_count = 0
        return "Transaction count reset for new month."

    def describe(self) -> str:
        return (
            f"{super().describe()}, Transaction Fee: {_money(self.transaction_fee)}"
            f", Free Transactions: {self.free_transaction_limit}"
            f", Used Transactions: {self.transaction_count}"
        )