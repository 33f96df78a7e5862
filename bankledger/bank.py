"""A bank: a container of accounts and the operations run against it."""

from __future__ import annotations

import sys
from typing import Any, Iterable, Optional, TextIO

from bankledger.container import MapContainer
from bankledger.money import Currency, Money
from bankledger.visitors import (
    BackupVisitor,
    CurrencyVisitor,
    MonthlyVisitor,
    PrintVisitor,
)


class Bank:
    """Holds accounts by number and applies transactions to them."""

    def __init__(
        self,
        container: Optional[MapContainer] = None,
        accounts: Iterable[Any] = (),
        errors: Optional[TextIO] = None,
    ) -> None:
        self.accounts = container if container is not None else MapContainer()
        self._errors = errors
        self.add_accounts(accounts)

    @property
    def errors(self) -> TextIO:
        """The stream currency problems are logged to."""
        return self._errors if self._errors is not None else sys.stderr

    def add_accounts(self, accounts: Iterable[Any]) -> None:
        """Add every account in ``accounts`` under its own number."""
        for account in accounts:
            self.accounts.add(account.number, account)

    def deposit(self, number: int, amount: Money) -> None:
        """Deposit ``amount`` into account ``number``."""
        self.accounts.get(number).deposit(amount)

    def withdraw(self, number: int, amount: Money) -> None:
        """Withdraw ``amount`` from account ``number``."""
        self.accounts.get(number).withdraw(amount)

    def apply_monthly_updates(self) -> None:
        """Charge monthly fees and pay interest on every account."""
        self.accounts.apply_visitor(MonthlyVisitor())

    def display(self, out: TextIO) -> None:
        """Write every account, one per line, in ascending number order."""
        self.accounts.apply_visitor(PrintVisitor(out))

    def backup_accounts(self, savings_out: TextIO, checking_out: TextIO) -> None:
        """Write savings and checking accounts to their own streams."""
        self.accounts.apply_visitor(BackupVisitor(checking_out, savings_out))

    def switch_to_currency(self, out: TextIO, currency: Currency) -> None:
        """Write every account with its amounts shown in ``currency``."""
        self.accounts.apply_visitor(CurrencyVisitor(out, currency))

    def log_currency_exception(
        self, command: str, number: int, first: Currency, second: Currency
    ) -> TextIO:
        """Report a failed conversion during ``command`` on account ``number``."""
        stream = self.errors
        stream.write(
            f"{command} {number}: cannot convert between {first} and {second}\n"
        )
        return stream