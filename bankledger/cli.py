"""Command-line entry point: load accounts, then run a file of commands."""

from __future__ import annotations

import sys
from contextlib import ExitStack
from typing import Optional, Sequence

from bankledger.bank import Bank
from bankledger.container import AccountNotFoundError
from bankledger.money import default_table
from bankledger.readers import TxtAccountReader, TxtTransactionReader

_PROG = "bankledger"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the bank on an accounts file, a commands file and a conversions file."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 3:
        sys.stderr.write(
            f"Usage: {_PROG} accountsFile commandsFile conversionsFile\n"
        )
        return 1

    accounts_file, commands_file, conversions_file = args
    if not commands_file.endswith(".txt"):
        sys.stderr.write(f"Error: unsupported commands file: {commands_file}\n")
        return 1

    with ExitStack() as stack:
        try:
            default_table().read(conversions_file)
            account_reader = stack.enter_context(TxtAccountReader(accounts_file))
            transaction_reader = stack.enter_context(
                TxtTransactionReader(commands_file)
            )
        except OSError as error:
            sys.stderr.write(f"Error: Could not open file: {error.filename}\n")
            return 1
        except ValueError as error:
            sys.stderr.write(f"Error: {error}\n")
            return 1

        bank = Bank(accounts=account_reader)
        try:
            for command in transaction_reader.commands(sys.stdout, bank):
                command.execute()
        except AccountNotFoundError as error:
            sys.stderr.write(f"{error}\n")
            return 1
        except ValueError as error:
            sys.stderr.write(f"Error: {error}\n")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())