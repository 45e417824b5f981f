"""Saving and loading a bank's accounts as a whitespace-separated text file."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

from tellerbook.bank import Bank

DATA_FILE = "bank_data.txt"

PathLike = Union[str, "os.PathLike[str]"]


def _num(value: float) -> str:
    """Format a number the way a default-configured text stream would."""
    return f"{value:g}"


@dataclass(frozen=True)
class _RecordSpec:
    fields: tuple[Callable[[str], Any], ...]
    add: Callable[[Bank, list[Any]], object]


# The stored transaction counts are read but not restored: loaded accounts
# start their month with a count of zero.
_RECORDS: dict[str, _RecordSpec] = {
    "SAVINGS": _RecordSpec(
        (int, str, float, float, float),
        lambda bank, v: bank.add_savings_account(*v),
    ),
    "CHECKING": _RecordSpec(
        (int, str, float, float, float, int),
        lambda bank, v: bank.add_checking_account(*v[:5]),
    ),
    "BUSINESS": _RecordSpec(
        (int, str, float, float, int, int),
        lambda bank, v: bank.add_business_account(*v[:5]),
    ),
}


def _format_lines(bank: Bank) -> Iterator[str]:
    for acc in bank._savings:
        yield (
            f"SAVINGS {acc.account_id} {acc.name} {_num(acc.balance)} "
            f"{_num(acc.interest_rate)} {_num(acc.minimum_balance)}"
        )
    for acc in bank._checking:
        yield (
            f"CHECKING {acc.account_id} {acc.name} {_num(acc.balance)} "
            f"{_num(acc.overdraft_limit)} {_num(acc.monthly_fee)} "
            f"{acc.transaction_count}"
        )
    for acc in bank._business:
        yield (
            f"BUSINESS {acc.account_id} {acc.name} {_num(acc.balance)} "
            f"{_num(acc.transaction_fee)} {acc.free_transaction_limit} "
            f"{acc.transaction_count}"
        )


def save_accounts(bank: Bank, path: PathLike = DATA_FILE) -> int:
    """Write every account in the bank to ``path``; return how many were written.

    Raises OSError if the file cannot be written.
    """
    lines = list(_format_lines(bank))
    with Path(path).open("w", encoding="utf-8") as handle:
        handle.writelines(f"{line}\n" for line in lines)
    return len(lines)


def _parse(tokens: Sequence[str]) -> Iterator[tuple[_RecordSpec, list[Any]]]:
    stream = iter(tokens)
    for kind in stream:
        spec = _RECORDS.get(kind)
        if spec is None:
            # Unrecognised tokens are skipped one at a time.
            continue
        values: list[Any] = []
        for convert in spec.fields:
            try:
                token = next(stream)
            except StopIteration:
                raise ValueError(f"truncated {kind} record") from None
            try:
                values.append(convert(token))
            except ValueError:
                raise ValueError(
                    f"bad value {token!r} in {kind} record"
                ) from None
        yield spec, values


def load_accounts(bank: Bank, path: PathLike = DATA_FILE) -> int:
    """Replace the bank's accounts with those stored in ``path``.

    Returns the number of accounts loaded. Raises FileNotFoundError if there
    is no such file (the bank is left untouched) and ValueError if the data
    is malformed (the bank is likewise left untouched).
    """
    text = Path(path).read_text(encoding="utf-8")
    records = list(_parse(text.split()))
    bank.clear()
    for spec, values in records:
        spec.add(bank, values)
    return len(records)