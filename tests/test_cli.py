import io
from pathlib import Path

import pytest

from tellerbook.cli import main


def _run(monkeypatch, capsys, text: str, *argv: str) -> str:
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main(list(argv)) == 0
    return capsys.readouterr().out


def test_exit_option_says_goodbye(monkeypatch, capsys) -> None:
    out = _run(monkeypatch, capsys, "12\n")
    assert "Welcome to the Enhanced Banking System!" in out
    assert out.rstrip().endswith("Thank you for using our banking system!")


def test_end_of_input_stops_cleanly(monkeypatch, capsys) -> None:
    out = _run(monkeypatch, capsys, "")
    assert "Choose an option:" in out
    assert "Thank you" not in out


def test_invalid_option(monkeypatch, capsys) -> None:
    out = _run(monkeypatch, capsys, "99\nabc\n12\n")
    assert out.count("Invalid option. Please try again.") == 2


def test_deposit_updates_balance(monkeypatch, capsys) -> None:
    out = _run(monkeypatch, capsys, "4 1001 100\n10 1001\n12\n")
    assert "Deposit successful!" in out
    assert "=== Search Result for ID: 1001 ===" in out
    assert "Name: Alice, Type: Savings, Balance: $1100.00" in out


def test_deposit_to_missing_account(monkeypatch, capsys) -> None:
    out = _run(monkeypatch, capsys, "4 9999 10\n12\n")
    assert "Account not found." in out


def test_withdraw_failure_message(monkeypatch, capsys) -> None:
    out = _run(monkeypatch, capsys, "5 9999 10\n12\n")
    assert (
        "Account not found, insufficient funds, "
        "or withdrawal violates account rules."
    ) in out


def test_withdraw_success(monkeypatch, capsys) -> None:
    out = _run(monkeypatch, capsys, "5 2001 100\n12\n")
    assert "Withdrawal successful!" in out


def test_add_and_find_by_name(monkeypatch, capsys) -> None:
    out = _run(monkeypatch, capsys, "2 4001 Erin 250 100 5\n11 Erin\n12\n")
    assert "Checking account added successfully!" in out
    assert "=== Search Result for Name: Erin ===" in out
    assert "ID: 4001, Name: Erin, Type: Checking" in out


def test_find_missing_name_and_id(monkeypatch, capsys) -> None:
    out = _run(monkeypatch, capsys, "11 Nobody\n10 77\n12\n")
    assert "Account with name Nobody not found!" in out
    assert "Account with ID 77 not found!" in out


def test_show_all_lists_sample_accounts(monkeypatch, capsys) -> None:
    out = _run(monkeypatch, capsys, "6\n12\n")
    assert "=== All Accounts ===" in out
    for name in ("Alice", "Bob", "CompanyXYZ"):
        assert f"Name: {name}," in out


def test_monthly_operations_report(monkeypatch, capsys) -> None:
    out = _run(monkeypatch, capsys, "7\n12\n")
    assert "Account 2001: Monthly fee applied: $12.00" in out
    assert "Account 3001: Transaction count reset for new month." in out


def test_bad_field_input_is_reported(monkeypatch, capsys) -> None:
    out = _run(monkeypatch, capsys, "4 notanid 10\n12\n")
    assert "Invalid input. Please try again." in out
    assert "Thank you for using our banking system!" in out


def test_save_and_load(monkeypatch, capsys, tmp_path: Path) -> None:
    data_file = tmp_path / "bank.txt"
    out = _run(
        monkeypatch,
        capsys,
        "8\n4 1001 100\n9\n10 1001\n12\n",
        "--data-file",
        str(data_file),
    )
    assert f"All accounts saved to {data_file}" in out
    assert f"All accounts loaded from {data_file}" in out
    # The deposit made after saving is undone by loading.
    assert "Name: Alice, Type: Savings, Balance: $1000.00" in out
    assert len(data_file.read_text().splitlines()) == 3


@pytest.mark.parametrize("choice", ["9"])
def test_load_without_file(monkeypatch, capsys, tmp_path: Path, choice) -> None:
    out = _run(
        monkeypatch,
        capsys,
        f"{choice}\n6\n12\n",
        "--data-file",
        str(tmp_path / "missing.txt"),
    )
    assert "No saved data found. Starting fresh." in out
    assert "Name: Alice," in out