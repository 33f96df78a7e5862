"""An ordered collection of accounts keyed by account number."""

from __future__ import annotations

from typing import Any, Dict, Iterator, TextIO


class AccountNotFoundError(LookupError):
    """Raised when an account number is not in the container."""

    def __init__(self, number: int) -> None:
        self.number = number
        super().__init__(f"ERROR: account {number} does not exist")


class MapContainer:
    """Accounts stored by number and visited in ascending number order."""

    def __init__(self) -> None:
        self._accounts: Dict[int, Any] = {}

    def add(self, number: int, account: Any) -> None:
        """Store ``account`` under ``number``; an existing entry is kept."""
        self._accounts.setdefault(number, account)

    def remove(self, number: int) -> None:
        """Drop the account under ``number`` if there is one."""
        self._accounts.pop(number, None)

    def __contains__(self, number: object) -> bool:
        return number in self._accounts

    def get(self, number: int) -> Any:
        """Return the account under ``number``."""
        try:
            return self._accounts[number]
        except KeyError:
            raise AccountNotFoundError(number) from None

    def __iter__(self) -> Iterator[Any]:
        for number in sorted(self._accounts):
            yield self._accounts[number]

    def __len__(self) -> int:
        return len(self._accounts)

    def print(self, out: TextIO) -> None:
        """Write each account on its own line in ascending number order."""
        for account in self:
            out.write(f"{account}\n")

    def apply_visitor(self, visitor: Any) -> None:
        """Let every account, in ascending number order, accept ``visitor``."""
        for account in self:
            account.accept(visitor)