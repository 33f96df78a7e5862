# bankledger

A small bank ledger. It loads checking and savings accounts from a text file,
reads a file of commands (deposits, withdrawals, transfers, monthly updates,
prints, backups and currency views) and applies them in order. Balances are
whole minor units (cents) of one of five currencies: `USD`, `GBP`, `EUR`,
`YEN` and `CHF`. Amounts in different currencies are converted through a
shared table of rates.

## Installation

```
pip install .
```

## Command line

```
bankledger ACCOUNTS_FILE COMMANDS_FILE CONVERSIONS_FILE
```

All three files are read as whitespace-separated tokens; line breaks do not
matter.

### Conversions file

A list of `SOURCE TARGET RATE` entries, for example `USD EUR 0.9`. A rate
converts an amount from `SOURCE` into `TARGET`; the reverse direction needs
its own entry. Converted amounts are truncated to whole minor units.

### Accounts file

Each account is:

```
TYPE NUMBER CURRENCY BALANCE INTEREST FIRST SECOND
```

- `TYPE` is `C` (checking) or `S` (savings).
- `BALANCE` is the opening balance in minor units.
- `INTEREST` is either `F RATE` (a flat rate, e.g. `F 0.05`) or
  `T N CUR1 AMT1 ... CURN AMTN RATE1 ... RATEN` (tiers: the highest tier
  minimum the balance reaches decides the rate).
- For a checking account, `FIRST` is the minimum balance and `SECOND` the fee
  charged while the balance is below it.
- For a savings account, `FIRST` is the monthly fee and `SECOND` the minimum
  balance. A savings account opened below its minimum is charged the fee at
  once.
- `FIRST` and `SECOND` are each a currency and an amount, e.g. `USD 500`.

Reading stops at the first account that is incomplete or malformed.

### Commands file

The file name must end in `.txt`. Each command is one letter followed by its
arguments:

- `D number currency amount`: deposit
- `W number currency amount`: withdraw
- `T from to currency amount`: transfer (withdraw, then deposit)
- `M`: charge monthly fees, then add interest, on every account
- `P`: print every account between two `-------------` lines
- `B checking_file savings_file`: write checking and savings accounts to two
  files
- `C currency`: print every account with its amounts shown in `currency`

Reading stops at the end of the file or at an unknown command letter.

Accounts are printed in ascending account-number order, one per line, e.g.
`1, USD100.00, F 5.00%, USD50.00, USD5.00`.

### Errors

- Wrong number of arguments, a commands file not ending in `.txt`, a file
  that cannot be opened, a malformed conversions file or a known command with
  missing or malformed fields: a message on standard error and exit status 1.
- A command naming an account that does not exist: the run stops with
  `ERROR: account N does not exist` and exit status 1.
- A deposit or withdrawal whose currency cannot be converted to the
  account's currency is skipped and reported on standard error as
  `D N: cannot convert between X and Y` (or `W ...`).

## Library use

```python
from bankledger.money import Currency, Money, default_table
from bankledger.interest import FlatInterest
from bankledger.accounts import CheckingAccount
from bankledger.bank import Bank

default_table().add_rate(Currency.EUR, Currency.USD, 1.1)

account = CheckingAccount(
    1,
    Money(10_000, Currency.USD),
    FlatInterest(0.05),
    Money(5_000, Currency.USD),
    Money(500, Currency.USD),
)
bank = Bank(accounts=[account])
bank.deposit(1, Money(1_000, Currency.EUR))
print(account)  # 1, USD111.00, F 5.00%, USD50.00, USD5.00
```

- `bankledger.money`: `Currency`, `Money`, `ConversionTable`,
  `default_table()` and `CurrencyMismatchError`. `Money` supports `+`, `-`,
  multiplication by a number and comparisons; when currencies differ, the
  right-hand operand is converted to the left-hand operand's currency using
  the shared table from `default_table()`. Without a rate,
  `CurrencyMismatchError` is raised.
- `bankledger.interest`: `FlatInterest` and `TieredInterest`.
- `bankledger.accounts`: `CheckingAccount` and `SavingsAccount`.
- `bankledger.container`: `MapContainer` and `AccountNotFoundError`.
- `bankledger.visitors`: `MonthlyVisitor`, `PrintVisitor`, `BackupVisitor`,
  `CurrencyVisitor`.
- `bankledger.bank`: `Bank`.
- `bankledger.commands`: one command class per command letter.
- `bankledger.readers`: `TxtAccountReader` and `TxtTransactionReader`.

## What it does not do

- Commands are read only from `.txt` files; no other command file format is
  accepted.
- Backup files hold the printed account lines, not the accounts-file format,
  so they cannot be loaded back as an accounts file.
- A transfer whose currency cannot be converted is not caught and ends the
  run.

## Running the tests

```
pip install ".[test]"
pytest
```