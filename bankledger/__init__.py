"""Multi-currency bank ledger: accounts, interest, fees and command files."""

__version__ = "0.1.0"