import io

import pytest

from bankledger.accounts import CheckingAccount, SavingsAccount
from bankledger.bank import Bank
from bankledger.commands import (
    BackupCommand,
    CurrencyCommand,
    DepositCommand,
    MonthlyCommand,
    PrintCommand,
    TransferCommand,
    WithdrawCommand,
)
from bankledger.interest import FlatInterest, TieredInterest
from bankledger.money import Currency, Money, default_table
from bankledger.readers import TxtAccountReader, TxtTransactionReader

ACCOUNTS = (
    "S 101 USD 100000 F 0.05 USD 500 USD 1000\n"
    "C 202 EUR 5000 T 2 EUR 0 EUR 10000 0.01 0.02 EUR 2000 EUR 300\n"
)


@pytest.fixture(autouse=True)
def _clean_table():
    default_table().clear()
    yield
    default_table().clear()


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_reads_savings_account_fields(tmp_path):
    path = _write(tmp_path, "accounts.txt", ACCOUNTS)
    with TxtAccountReader(path) as reader:
        account = reader.read_account()
    assert isinstance(account, SavingsAccount)
    assert account.number == 101
    assert account.balance == Money(100000, Currency.USD)
    assert isinstance(account.interest, FlatInterest)
    assert account.interest.rate == 0.05
    assert account.monthly_fee == Money(500, Currency.USD)
    assert account.min_balance == Money(1000, Currency.USD)


def test_reads_checking_account_with_tiers(tmp_path):
    path = _write(tmp_path, "accounts.txt", ACCOUNTS)
    with TxtAccountReader(path) as reader:
        reader.read_account()
        account = reader.read_account()
    assert isinstance(account, CheckingAccount)
    assert account.number == 202
    assert account.balance.currency is Currency.EUR
    assert isinstance(account.interest, TieredInterest)
    assert [rate for _, rate in account.interest.tiers] == [0.01, 0.02]
    assert account.min_balance == Money(2000, Currency.EUR)
    assert account.min_balance_fee == Money(300, Currency.EUR)


def test_iteration_yields_all_then_stops(tmp_path):
    path = _write(tmp_path, "accounts.txt", ACCOUNTS)
    with TxtAccountReader(path) as reader:
        numbers = [account.number for account in reader]
        assert reader.read_account() is None
    assert numbers == [101, 202]


def test_savings_below_minimum_is_charged_on_creation(tmp_path):
    path = _write(tmp_path, "accounts.txt", "S 7 USD 100 F 0.01 USD 25 USD 1000\n")
    with TxtAccountReader(path) as reader:
        account = reader.read_account()
    assert account.below_min_balance is True
    assert account.balance == Money(100, Currency.USD) - Money(25, Currency.USD)


def test_unknown_account_type_gives_none(tmp_path):
    path = _write(tmp_path, "accounts.txt", "X 1 USD 100 F 0.01 USD 1 USD 1\n")
    with TxtAccountReader(path) as reader:
        assert reader.read_account() is None


def test_truncated_account_gives_none(tmp_path):
    path = _write(tmp_path, "accounts.txt", "C 1 USD 100 F 0.01 USD\n")
    with TxtAccountReader(path) as reader:
        assert list(reader) == []


def test_closed_account_reader_reads_nothing(tmp_path):
    path = _write(tmp_path, "accounts.txt", ACCOUNTS)
    reader = TxtAccountReader(path)
    reader.close()
    assert reader.read_account() is None


def test_missing_account_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        TxtAccountReader(tmp_path / "absent.txt")


def test_reads_every_command_kind(tmp_path):
    path = _write(
        tmp_path,
        "commands.txt",
        "W 101 USD 250\nD 202 EUR 75\nP\nM\nB chk.txt sav.txt\nC GBP\nT 101 202 USD 10\n",
    )
    bank = Bank()
    out = io.StringIO()
    with TxtTransactionReader(path) as reader:
        commands = list(reader.commands(out, bank))
    assert [type(c) for c in commands] == [
        WithdrawCommand,
        DepositCommand,
        PrintCommand,
        MonthlyCommand,
        BackupCommand,
        CurrencyCommand,
        TransferCommand,
    ]
    withdraw, deposit, show, monthly, backup, currency, transfer = commands
    assert withdraw.number == 101 and withdraw.amount == Money(250, Currency.USD)
    assert deposit.number == 202 and deposit.amount.currency is Currency.EUR
    assert show.out is out and show.bank is bank
    assert monthly.bank is bank
    assert (backup.checking_file, backup.savings_file) == ("chk.txt", "sav.txt")
    assert currency.currency is Currency.GBP
    assert (transfer.from_number, transfer.to_number) == (101, 202)
    assert transfer.amount == Money(10, Currency.USD)


def test_unknown_command_stops_reading(tmp_path):
    path = _write(tmp_path, "commands.txt", "P\nX\nM\n")
    with TxtTransactionReader(path) as reader:
        commands = list(reader.commands(io.StringIO(), Bank()))
    assert len(commands) == 1
    assert isinstance(commands[0], PrintCommand)


def test_empty_command_file_gives_none(tmp_path):
    path = _write(tmp_path, "commands.txt", "")
    with TxtTransactionReader(path) as reader:
        assert reader.read_command(io.StringIO(), Bank()) is None


def test_incomplete_command_raises(tmp_path):
    path = _write(tmp_path, "commands.txt", "W 101\n")
    with TxtTransactionReader(path) as reader:
        with pytest.raises(ValueError):
            reader.read_command(io.StringIO(), Bank())


def test_read_commands_act_on_bank(tmp_path):
    accounts = _write(tmp_path, "accounts.txt", ACCOUNTS)
    commands = _write(tmp_path, "commands.txt", "D 101 USD 500\n")
    with TxtAccountReader(accounts) as reader:
        bank = Bank(accounts=reader)
    before = bank.accounts.get(101).balance
    with TxtTransactionReader(commands) as reader:
        for command in reader.commands(io.StringIO(), bank):
            command.execute()
    assert bank.accounts.get(101).balance == before + Money(500, Currency.USD)


def test_closed_transaction_reader_reads_nothing(tmp_path):
    path = _write(tmp_path, "commands.txt", "P\n")
    reader = TxtTransactionReader(path)
    reader.close()
    assert reader.read_command(io.StringIO(), Bank()) is None