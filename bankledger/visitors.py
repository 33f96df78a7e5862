"""Visitors that walk accounts and act on each by account type."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TextIO

from bankledger.accounts import CheckingAccount, SavingsAccount
from bankledger.money import Currency


class AccountVisitor(ABC):
    """An operation applied to each kind of account."""

    @abstractmethod
    def visit_checking(self, account: CheckingAccount) -> None:
        """Act on a checking account."""

    @abstractmethod
    def visit_savings(self, account: SavingsAccount) -> None:
        """Act on a savings account."""


class MonthlyVisitor(AccountVisitor):
    """Charges the monthly fee and then pays interest."""

    def visit_checking(self, account: CheckingAccount) -> None:
        account.charge_monthly_fee()
        account.generate_interest()

    def visit_savings(self, account: SavingsAccount) -> None:
        account.charge_monthly_fee()
        account.generate_interest()


class PrintVisitor(AccountVisitor):
    """Writes each account on its own line."""

    def __init__(self, out: TextIO) -> None:
        self.out = out

    def visit_checking(self, account: CheckingAccount) -> None:
        self.out.write(f"{account}\n")

    def visit_savings(self, account: SavingsAccount) -> None:
        self.out.write(f"{account}\n")


class BackupVisitor(AccountVisitor):
    """Writes checking and savings accounts to separate streams."""

    def __init__(self, checking_out: TextIO, savings_out: TextIO) -> None:
        self.checking_out = checking_out
        self.savings_out = savings_out

    def visit_checking(self, account: CheckingAccount) -> None:
        self.checking_out.write(f"{account}\n")

    def visit_savings(self, account: SavingsAccount) -> None:
        self.savings_out.write(f"{account}\n")


class CurrencyVisitor(AccountVisitor):
    """Writes each account with its amounts shown in one currency."""

    def __init__(self, out: TextIO, currency: Currency) -> None:
        self.out = out
        self.currency = currency

    def visit_checking(self, account: CheckingAccount) -> None:
        self.out.write(account.display_converted(self.currency) + "\n")

    def visit_savings(self, account: SavingsAccount) -> None:
        self.out.write(account.display_converted(self.currency) + "\n")