# tellerbook

A small ledger of bank accounts kept in memory, with a menu-driven teller
at the terminal and a plain-text file for saving and loading.

Three kinds of account are supported (`tellerbook.accounts`):

- **`SavingsAccount`** – earns monthly interest; a withdrawal may not take
  the balance below the minimum (defaults: rate 0.02, minimum 100.00).
- **`CheckingAccount`** – may go into overdraft up to a limit, counts its
  transactions and pays a monthly fee (defaults: overdraft 500.00, fee 10.00).
- **`BusinessAccount`** – a number of free transactions per month, then a
  fee on every further deposit or withdrawal (defaults: fee 2.00, 50 free).
  Each fee charged adds a line to the account's `notices` list.

Deposits of zero or less are ignored; withdrawals return `True` or `False`
depending on whether the account's rules allow them.

## Installing

```
pip install .
```

## The teller

```
tellerbook
tellerbook --data-file other_data.txt
```

The teller starts with three sample accounts (1001 Alice savings, 2001 Bob
checking, 3001 CompanyXYZ business) and reads whitespace-separated input
from standard input. Its numbered menu offers:

1–3. add a savings, checking or business account  
4–5. deposit or withdraw  
6. show all accounts  
7. apply the month's interest, fees and transaction-count resets  
8–9. save to or load from the data file (`bank_data.txt` in the current
directory unless `--data-file` is given)  
10–11. find an account by id or by name  
12. exit

Bad input for an option prints a message and returns to the menu; end of
input ends the session.

## Using it from Python

```python
from tellerbook.bank import Bank
from tellerbook.storage import save_accounts, load_accounts

bank = Bank()
bank.add_savings_account(1001, "Alice", 1000.0, 0.03, 50.0)
bank.add_checking_account(2001, "Bob", 500.0, 300.0, 12.0)
bank.add_business_account(3001, "CompanyXYZ", 5000.0, 1.5, 100)

bank.deposit(1001, 250.0)        # True if the account exists
bank.withdraw(2001, 700.0)       # True if the account's rules allow it

print(bank.describe_all())
print(bank.apply_monthly_operations_to_all())   # returns a report

bank.find_by_id(2001)            # the account, or None
bank.find_by_name("Alice")       # a list of matching accounts

save_accounts(bank, "bank_data.txt")    # returns the number written
restored = Bank()
load_accounts(restored, "bank_data.txt")  # replaces restored's accounts
```

`Bank.accounts()` lists every account, savings first, then checking, then
business; lookups search in the same order. `Bank.find_account_index()`
looks only among savings accounts.

## The data file

One account to a line, fields separated by spaces, so names must be single
words. `load_accounts` raises `FileNotFoundError` when the file is missing
and `ValueError` when a record is truncated or holds a bad value; in both
cases the bank is left as it was. Transaction counts are written to the file
but not restored: loaded accounts start with a count of zero.

## Tests

```
pip install .[test]
pytest
```