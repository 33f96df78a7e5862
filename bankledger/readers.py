"""Readers that build accounts and commands from whitespace-separated text files."""

from __future__ import annotations

from os import PathLike
from typing import Iterator, Optional, TextIO, Union

from bankledger.accounts import Account, CheckingAccount, SavingsAccount
from bankledger.bank import Bank
from bankledger.commands import (
    BackupCommand,
    Command,
    CurrencyCommand,
    DepositCommand,
    MonthlyCommand,
    PrintCommand,
    TransferCommand,
    WithdrawCommand,
)
from bankledger.interest import FlatInterest, Interest, TieredInterest
from bankledger.money import Currency, Money

_SAVINGS = "S"
_CHECKING = "C"
_FLAT = "F"
_TIERED = "T"


def _tokenize(handle: TextIO) -> Iterator[str]:
    for line in handle:
        yield from line.split()


class _TokenFile:
    """A text file read one whitespace-separated token at a time."""

    def __init__(self, path: Union[str, PathLike]) -> None:
        self.path = path
        self._handle: Optional[TextIO] = open(path, encoding="utf-8")
        self._tokens: Iterator[str] = _tokenize(self._handle)

    def _close_file(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None
        self._tokens = iter(())


class TxtAccountReader(_TokenFile):
    """Reads accounts from a text file, one account description at a time.

    Each account is ``TYPE NUMBER CURRENCY BALANCE INTEREST ...`` where TYPE
    is ``S`` (savings) or ``C`` (checking) and INTEREST is ``F RATE`` or
    ``T N (CURRENCY AMOUNT)*N RATE*N``.  Savings accounts then give the
    monthly fee and the minimum balance; checking accounts give the minimum
    balance and the fee charged below it.
    """

    def read_account(self) -> Optional[Account]:
        """Return the next account, or None when no further account can be read."""
        try:
            return self._parse_account()
        except (StopIteration, ValueError):
            return None

    def _take(self) -> str:
        return next(self._tokens)

    def _parse_account(self) -> Optional[Account]:
        kind = self._take()
        number = int(self._take())
        currency = Currency.parse(self._take())
        balance = Money(int(self._take()), currency)
        interest_kind = self._take()

        if kind not in (_SAVINGS, _CHECKING) or interest_kind not in (_FLAT, _TIERED):
            return None

        interest: Interest
        if interest_kind == _FLAT:
            interest = FlatInterest(float(self._take()))
        else:
            interest = TieredInterest.from_tokens(self._tokens)

        first = Money.parse(self._take(), self._take())
        second = Money.parse(self._take(), self._take())

        if kind == _SAVINGS:
            return SavingsAccount(number, balance, interest, second, first)
        return CheckingAccount(number, balance, interest, first, second)

    def __iter__(self) -> Iterator[Account]:
        while (account := self.read_account()) is not None:
            yield account

    def close(self) -> None:
        """Close the file; later reads find nothing."""
        self._close_file()

    def __enter__(self) -> "TxtAccountReader":
        return self

    def __exit__(self, *args) -> None:
        self.close()


class TxtTransactionReader(_TokenFile):
    """Reads bank commands from a text file, one command at a time."""

    def _take(self, code: str) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError(f"incomplete {code} command in {self.path}") from None

    def _money(self, code: str) -> Money:
        currency_text = self._take(code)
        return Money.parse(currency_text, self._take(code))

    def read_command(self, out: TextIO, bank: Bank) -> Optional[Command]:
        """Return the next command, or None at the end or at an unknown command.

        Raises ValueError when a known command lacks or garbles its fields.
        """
        try:
            code = next(self._tokens)
        except StopIteration:
            return None

        if code == "W":
            number = int(self._take(code))
            return WithdrawCommand(bank, number, self._money(code))
        if code == "D":
            number = int(self._take(code))
            return DepositCommand(bank, number, self._money(code))
        if code == "P":
            return PrintCommand(bank, out)
        if code == "M":
            return MonthlyCommand(bank)
        if code == "B":
            checking_file = self._take(code)
            savings_file = self._take(code)
            return BackupCommand(bank, checking_file, savings_file)
        if code == "C":
            return CurrencyCommand(bank, out, Currency.parse(self._take(code)))
        if code == "T":
            from_number = int(self._take(code))
            to_number = int(self._take(code))
            return TransferCommand(bank, from_number, to_number, self._money(code))
        return None

    def commands(self, out: TextIO, bank: Bank) -> Iterator[Command]:
        """Yield commands until the end of the file or an unknown command."""
        while (command := self.read_command(out, bank)) is not None:
            yield command

    def close(self) -> None:
        """Close the file; later reads find nothing."""
        self._close_file()

    def __enter__(self) -> "TxtTransactionReader":
        return self

    def __exit__(self, *args) -> None:
        self.close()