"""Interest schemes that grow an account balance."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from bankledger.money import Currency, CurrencyMismatchError, Money


class Interest(ABC):
    """A rule that turns a balance into the balance with interest applied."""

    @abstractmethod
    def generate(self, balance: Money) -> Money:
        """Return ``balance`` with interest applied."""

    @abstractmethod
    def display_converted(self, currency: Currency) -> str:
        """Describe the scheme with its amounts shown in ``currency``."""

    @abstractmethod
    def __str__(self) -> str:
        """Describe the scheme."""


class FlatInterest(Interest):
    """A single rate applied to the whole balance."""

    def __init__(self, rate: float = 0.0) -> None:
        self.rate = float(rate)

    def generate(self, balance: Money) -> Money:
        return balance + balance * self.rate

    def display_converted(self, currency: Currency) -> str:
        # A flat rate holds no amounts, so there is nothing to convert.
        return str(self)

    def __str__(self) -> str:
        return f"F {self.rate * 100:.2f}%"


class TieredInterest(Interest):
    """Rates chosen by the highest minimum balance the balance reaches."""

    def __init__(self, tiers: Optional[Iterable[tuple[Money, float]]] = None) -> None:
        self.tiers: list[tuple[Money, float]] = []
        for minimum, rate in tiers or ():
            self.add_tier(minimum, rate)

    def add_tier(self, minimum: Money, rate: float) -> None:
        """Append a tier paying ``rate`` on balances of at least ``minimum``."""
        self.tiers.append((minimum, float(rate)))

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> "TieredInterest":
        """Read ``N``, then N ``CURRENCY AMOUNT`` minimums, then N rates.

        Only the tokens that describe the tiers are consumed when ``tokens``
        is an iterator, so the caller can go on reading from it.
        """
        stream = iter(tokens)
        try:
            count = int(next(stream))
            if count < 0:
                raise ValueError(f"negative tier count: {count}")
            minimums = [Money.parse(next(stream), next(stream)) for _ in range(count)]
            rates = [float(next(stream)) for _ in range(count)]
        except StopIteration:
            raise ValueError("incomplete tiered interest description") from None
        return cls(zip(minimums, rates))

    def generate(self, balance: Money) -> Money:
        if balance >= Money(0, balance.currency):
            for minimum, rate in reversed(self.tiers):
                if balance >= minimum:
                    return balance + balance * rate
        return balance

    def _rates_text(self) -> str:
        return "".join(f" {rate * 100:.2f}%" for _, rate in self.tiers)

    def display_converted(self, currency: Currency) -> str:
        parts = ["T"]
        for minimum, _ in self.tiers:
            try:
                parts.append(f" {minimum.convert_to(currency)}")
            except CurrencyMismatchError:
                parts.append(f" {minimum}")
        return "".join(parts) + self._rates_text()

    def __str__(self) -> str:
        return "T" + "".join(f" {minimum}" for minimum, _ in self.tiers) + self._rates_text()