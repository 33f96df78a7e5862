"""Commands that run one transaction or report against a bank."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from os import PathLike
from typing import TextIO, Union

from bankledger.bank import Bank
from bankledger.money import Currency, CurrencyMismatchError, Money

_SEPARATOR = "-------------\n"


class Command(ABC):
    """A deferred operation on a bank."""

    @abstractmethod
    def execute(self) -> None:
        """Carry out the operation."""


@dataclass
class DepositCommand(Command):
    """Deposits an amount into one account."""

    bank: Bank
    number: int
    amount: Money

    def execute(self) -> None:
        try:
            self.bank.deposit(self.number, self.amount)
        except CurrencyMismatchError as error:
            self.bank.log_currency_exception("D", self.number, error.source, error.target)


@dataclass
class WithdrawCommand(Command):
    """Withdraws an amount from one account; a failed conversion is logged."""

    bank: Bank
    number: int
    amount: Money

    def execute(self) -> None:
        try:
            self.bank.withdraw(self.number, self.amount)
        except CurrencyMismatchError as error:
            self.bank.log_currency_exception("W", self.number, error.source, error.target)


@dataclass
class TransferCommand(Command):
    """Moves an amount from one account to another."""

    bank: Bank
    from_number: int
    to_number: int
    amount: Money

    def execute(self) -> None:
        self.bank.withdraw(self.from_number, self.amount)
        self.bank.deposit(self.to_number, self.amount)


@dataclass
class PrintCommand(Command):
    """Writes every account between two separator lines."""

    bank: Bank
    out: TextIO

    def execute(self) -> None:
        self.out.write(_SEPARATOR)
        self.bank.display(self.out)
        self.out.write(_SEPARATOR)


@dataclass
class MonthlyCommand(Command):
    """Charges monthly fees and pays interest on every account."""

    bank: Bank

    def execute(self) -> None:
        self.bank.apply_monthly_updates()


@dataclass
class BackupCommand(Command):
    """Writes checking and savings accounts to two files."""

    bank: Bank
    checking_file: Union[str, PathLike]
    savings_file: Union[str, PathLike]

    def execute(self) -> None:
        with open(self.checking_file, "w", encoding="utf-8") as checking_out, open(
            self.savings_file, "w", encoding="utf-8"
        ) as savings_out:
            self.bank.backup_accounts(savings_out, checking_out)


@dataclass
class CurrencyCommand(Command):
    """Writes every account with its amounts shown in one currency."""

    bank: Bank
    out: TextIO
    currency: Currency

    def execute(self) -> None:
        self.bank.switch_to_currency(self.out, self.currency)