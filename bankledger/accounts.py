"""Bank accounts: a common base plus checking and savings variants."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from bankledger.interest import Interest
from bankledger.money import Currency, CurrencyMismatchError, Money


def _shown_in(money: Money, currency: Currency) -> str:
    """Render ``money`` in ``currency``, or as it is when no rate is known."""
    try:
        return str(money.convert_to(currency))
    except CurrencyMismatchError:
        return str(money)


class Account(ABC):
    """An account with a number, a balance and an interest scheme."""

    def __init__(self, number: int, balance: Money, interest: Interest) -> None:
        self.number = number
        self._balance = balance
        self.interest = interest

    @property
    def balance(self) -> Money:
        """The current balance."""
        return self._balance

    def deposit(self, amount: Money) -> None:
        """Add ``amount`` to the balance, converting it if needed."""
        self._balance = self._balance + amount

    def withdraw(self, amount: Money) -> None:
        """Take ``amount`` from the balance, converting it if needed."""
        self._balance = self._balance - amount

    def charge_monthly_fee(self) -> None:
        """Charge whatever fee the account type levies each month."""

    def generate_interest(self) -> None:
        """Apply the interest scheme to the balance."""
        self._balance = self.interest.generate(self._balance)

    def display_converted(self, currency: Currency) -> str:
        """Describe the account with its amounts shown in ``currency``."""
        return (
            f"{self.number}, {_shown_in(self._balance, currency)}, "
            f"{self.interest.display_converted(currency)}, "
        )

    def __str__(self) -> str:
        return f"{self.number}, {self._balance}, {self.interest}, "

    @abstractmethod
    def accept(self, visitor: Any) -> None:
        """Dispatch to the ``visitor`` method for this account type."""


class CheckingAccount(Account):
    """An account charged a fee while its balance is below a minimum."""

    def __init__(
        self,
        number: int,
        balance: Money,
        interest: Interest,
        min_balance: Money,
        min_balance_fee: Money,
    ) -> None:
        super().__init__(number, balance, interest)
        self.min_balance = min_balance
        self.min_balance_fee = min_balance_fee
        self.below_min_balance = balance < min_balance

    def deposit(self, amount: Money) -> None:
        super().deposit(amount)

    def withdraw(self, amount: Money) -> None:
        super().withdraw(amount)
        if self.balance < self.min_balance:
            self.below_min_balance = True

    def _apply_min_balance_fee(self) -> None:
        if self.below_min_balance:
            super().withdraw(self.min_balance_fee)
        self.below_min_balance = self.balance < self.min_balance

    def charge_monthly_fee(self) -> None:
        self._apply_min_balance_fee()

    def generate_interest(self) -> None:
        super().generate_interest()

    def display_converted(self, currency: Currency) -> str:
        return (
            super().display_converted(currency)
            + f"{_shown_in(self.min_balance, currency)}, "
            + _shown_in(self.min_balance_fee, currency)
        )

    def __str__(self) -> str:
        return super().__str__() + f"{self.min_balance}, {self.min_balance_fee}"

    def accept(self, visitor: Any) -> None:
        visitor.visit_checking(self)


class SavingsAccount(Account):
    """An account charged a monthly fee once it has dropped below a minimum."""

    def __init__(
        self,
        number: int,
        balance: Money,
        interest: Interest,
        min_balance: Money,
        monthly_fee: Money,
    ) -> None:
        super().__init__(number, balance, interest)
        self.min_balance = min_balance
        self.monthly_fee = monthly_fee
        if self.balance >= min_balance:
            self.below_min_balance = False
        else:
            self.below_min_balance = True
            super().withdraw(monthly_fee)

    def deposit(self, amount: Money) -> None:
        super().deposit(amount)

    def withdraw(self, amount: Money) -> None:
        super().withdraw(amount)
        if self.balance < self.min_balance:
            self.below_min_balance = True

    def charge_monthly_fee(self) -> None:
        if self.below_min_balance:
            super().withdraw(self.monthly_fee)
        if self.balance < self.min_balance:
            self.below_min_balance = True

    def generate_interest(self) -> None:
        if self.balance >= Money(0, self.balance.currency):
            super().generate_interest()

    def display_converted(self, currency: Currency) -> str:
        return (
            super().display_converted(currency)
            + f"{_shown_in(self.monthly_fee, currency)}, "
            + _shown_in(self.min_balance, currency)
        )

    def __str__(self) -> str:
        return super().__str__() + f"{self.monthly_fee}, {self.min_balance}"

    def accept(self, visitor: Any) -> None:
        visitor.visit_savings(self)