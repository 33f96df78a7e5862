"""Currencies, conversion rates and money amounts held in minor units."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from os import PathLike
from typing import Union


class Currency(Enum):
    """A currency a money amount can be held in."""

    USD = "USD"
    GBP = "GBP"
    EUR = "EUR"
    YEN = "YEN"
    CHF = "CHF"

    @classmethod
    def parse(cls, text: str) -> "Currency":
        """Return the currency named by ``text``; raise ValueError if unknown."""
        try:
            return cls(text.strip())
        except ValueError:
            raise ValueError(f"unknown currency: {text!r}") from None

    def __str__(self) -> str:
        return self.value


class CurrencyMismatchError(Exception):
    """Raised when an amount cannot be converted between two currencies."""

    def __init__(self, source: Currency, target: Currency) -> None:
        self.source = source
        self.target = target
        super().__init__(f"no conversion from {source} to {target}")


class ConversionTable:
    """Exchange rates keyed by (source, target) currency pairs."""

    def __init__(self) -> None:
        self._rates: dict[tuple[Currency, Currency], float] = {}

    def add_rate(self, source: Currency, target: Currency, rate: float) -> None:
        """Record the rate that converts ``source`` amounts into ``target``."""
        self._rates[(source, target)] = float(rate)

    def has_conversion(self, source: Currency, target: Currency) -> bool:
        """Tell whether a rate from ``source`` to ``target`` is known."""
        return (source, target) in self._rates

    def rate(self, source: Currency, target: Currency) -> float:
        """Return the rate from ``source`` to ``target``."""
        try:
            return self._rates[(source, target)]
        except KeyError:
            raise CurrencyMismatchError(source, target) from None

    def read(self, path: Union[str, PathLike]) -> None:
        """Load rates from a file of ``SOURCE TARGET RATE`` entries."""
        with open(path, encoding="utf-8") as handle:
            tokens = handle.read().split()
        if len(tokens) % 3:
            raise ValueError(f"incomplete conversion entry in {path}")
        for source, target, rate in zip(tokens[::3], tokens[1::3], tokens[2::3]):
            self.add_rate(Currency.parse(source), Currency.parse(target), float(rate))

    def clear(self) -> None:
        """Forget every known rate."""
        self._rates.clear()


_DEFAULT_TABLE = ConversionTable()


def default_table() -> ConversionTable:
    """Return the table shared by all money conversions."""
    return _DEFAULT_TABLE


@dataclass(frozen=True, eq=False)
class Money:
    """An amount in minor units (cents) of a given currency."""

    amount: int
    currency: Currency

    __hash__ = None  # equality converts between currencies

    @classmethod
    def parse(cls, currency_text: str, amount_text: str) -> "Money":
        """Build money from a currency code and an amount in minor units."""
        return cls(int(amount_text), Currency.parse(currency_text))

    def convert_to(self, currency: Currency) -> "Money":
        """Return this amount in ``currency`` using the shared rate table."""
        if self.currency == currency:
            return self
        table = default_table()
        if not table.has_conversion(self.currency, currency):
            raise CurrencyMismatchError(self.currency, currency)
        return Money(int(self.amount * table.rate(self.currency, currency)), currency)

    def _amount_in_own_currency(self, other: "Money") -> int:
        return other.convert_to(self.currency).amount

    def __add__(self, other: object) -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self.amount + self._amount_in_own_currency(other), self.currency)

    def __sub__(self, other: object) -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self.amount - self._amount_in_own_currency(other), self.currency)

    def __mul__(self, multiplier: float) -> "Money":
        if not isinstance(multiplier, (int, float)):
            return NotImplemented
        return Money(int(self.amount * multiplier), self.currency)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.amount == self._amount_in_own_currency(other)

    def __lt__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.amount < self._amount_in_own_currency(other)

    def __ge__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.amount >= self._amount_in_own_currency(other)

    def __str__(self) -> str:
        return f"{self.currency}{self.amount * 0.01:.2f}"