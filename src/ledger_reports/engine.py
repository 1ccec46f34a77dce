# Ledger Reports - Ledger ingestion & financial reporting engine
# Copyright (c) 2025 Maxence Bernard (maxencebernardhub)
# Licensed under the MIT License. See LICENSE file for details.

"""
Core aggregation engine for Ledger Reports.

This module turns the cached ledger rows into the numbers behind the three
reports. It does not know anything about files or output formats: every
function takes a ledger DataFrame (columns ``date, account, description,
debit, credit``, as produced by ``io.records_to_frame`` or
``LedgerCache.frame``) and returns plain pandas / Python structures.

Sign convention
---------------
Every amount is computed as:

    amount = debit - credit

and is never normalized by account type. Credit-normal accounts (revenues,
liabilities, equity) therefore carry negative balances, and the net income
of a profitable period is negative. This is intended and must not be
"fixed" here.

Data quality
------------
Missing or unparseable debit/credit values count as 0. Unparseable dates
are not dropped: they are bucketed under ``INVALID_YEAR``. None of these
situations raise.

Key components
--------------
- ``signed_amounts(frame)``:
    debit - credit per row.
- ``account_balances(frame)``:
    balance per account, in first-seen order.
- ``cash_by_year(frame)``:
    balance of the "Cash" account per calendar year, lexically sorted.
- ``STATEMENT_TAXONOMY`` / ``build_financial_statement(frame)``:
    fixed income statement + balance sheet layout and its totals.
"""

from dataclasses import dataclass
from typing import Any, Optional

import pandas as pd

CASH_ACCOUNT = "Cash"

# Key used for rows whose date cannot be parsed.
INVALID_YEAR = "NaN"

# Date literals pandas would resolve to the current date.
_RELATIVE_DATES = frozenset({"now", "today"})

# Statement -> section -> ordered account names. Only these accounts are
# reported by the financial statement, in exactly this order.
STATEMENT_TAXONOMY: dict[str, dict[str, tuple[str, ...]]] = {
    "Income Statement": {
        "Revenues": ("Sales Revenue",),
        "Expenses": (
            "Cost of Goods Sold",
            "Salaries Expense",
            "Rent Expense",
            "Utilities Expense",
            "Interest Expense",
            "Tax Expense",
        ),
    },
    "Balance Sheet": {
        "Assets": (
            "Cash",
            "Accounts Receivable",
            "Inventory",
            "Fixed Assets",
            "Prepaid Expenses",
        ),
        "Liabilities": (
            "Accounts Payable",
            "Loan Payable",
            "Sales Tax Payable",
            "Accrued Liabilities",
            "Unearned Revenue",
            "Dividends Payable",
        ),
        "Equity": ("Common Stock", "Retained Earnings"),
    },
}


def _to_amount(values: pd.Series) -> pd.Series:
    """Coerce raw text amounts to floats, with 0 for missing/invalid values."""
    cleaned = values.map(lambda v: v.strip() if isinstance(v, str) else v)
    return pd.to_numeric(cleaned, errors="coerce").fillna(0.0).astype(float)


def signed_amounts(frame: pd.DataFrame) -> pd.Series:
    """Return ``debit - credit`` for every row of ``frame``."""
    return _to_amount(frame["debit"]) - _to_amount(frame["credit"])


def _accounts(frame: pd.DataFrame) -> pd.Series:
    # A row too short to hold an account is reported under "".
    return frame["account"].fillna("").astype(str)


def _ledger_data(frame: pd.DataFrame) -> pd.DataFrame:
    """Return ``date``, ``account`` and signed ``amount`` on a fresh index."""
    frame = frame.reset_index(drop=True)
    return pd.DataFrame(
        {
            "date": frame["date"],
            "account": _accounts(frame),
            "amount": signed_amounts(frame),
        }
    )


def account_balances(frame: pd.DataFrame) -> pd.Series:
    """
    Accumulate ``debit - credit`` per account.

    Any value found in the account position becomes a key; nothing is
    filtered out.

    Returns
    -------
    pandas.Series
        Index: account name, in order of first appearance.
        Values: float balances.
    """
    if frame.empty:
        return pd.Series(dtype=float, name="balance")

    data = _ledger_data(frame)
    balances = data.groupby("account", sort=False)["amount"].sum()
    balances.name = "balance"
    return balances


def fiscal_year_key(value: Any) -> str:
    """
    Return the calendar year of ``value`` as a string.

    Unparseable (or missing) dates give ``INVALID_YEAR`` instead of raising.
    The relative literals ``"now"`` and ``"today"``, which pandas resolves
    against the wall clock, are invalid too.
    """
    if value is None:
        return INVALID_YEAR
    if isinstance(value, str) and value.strip().lower() in _RELATIVE_DATES:
        return INVALID_YEAR
    ts = pd.to_datetime(value, errors="coerce")
    if pd.isna(ts):
        return INVALID_YEAR
    return str(ts.year)


def cash_by_year(frame: pd.DataFrame, account: str = CASH_ACCOUNT) -> pd.Series:
    """
    Accumulate ``debit - credit`` of the cash account per fiscal year.

    Only rows whose account is exactly ``account`` are considered. Years
    without any such row are absent from the result.

    Returns
    -------
    pandas.Series
        Index: year keys (str), sorted lexically. For four-digit years this
        is the same as numeric order; ``INVALID_YEAR`` sorts after them.
        Values: float balances.
    """
    if frame.empty:
        return pd.Series(dtype=float, name="cash_balance")

    data = _ledger_data(frame)
    cash = data[data["account"] == account]
    if cash.empty:
        return pd.Series(dtype=float, name="cash_balance")

    by_year = (
        cash.assign(year=cash["date"].map(fiscal_year_key))
        .groupby("year", sort=False)["amount"]
        .sum()
    )
    by_year = by_year.reindex(sorted(by_year.index))
    by_year.name = "cash_balance"
    return by_year


def taxonomy_accounts(
    taxonomy: Optional[dict[str, dict[str, tuple[str, ...]]]] = None,
) -> list[str]:
    """Return every account name of the taxonomy, in layout order."""
    taxonomy = taxonomy or STATEMENT_TAXONOMY
    names: list[str] = []
    for sections in taxonomy.values():
        for accounts in sections.values():
            for name in accounts:
                if name not in names:
                    names.append(name)
    return names


def statement_balances(
    frame: pd.DataFrame,
    taxonomy: Optional[dict[str, dict[str, tuple[str, ...]]]] = None,
) -> dict[str, float]:
    """
    Balances of the taxonomy accounts only.

    Every taxonomy account is seeded at 0.0, so accounts absent from the
    data still appear. Rows for other accounts are ignored.
    """
    names = taxonomy_accounts(taxonomy)
    balances: dict[str, float] = {name: 0.0 for name in names}
    if frame.empty:
        return balances

    data = _ledger_data(frame)
    selected = data[data["account"].isin(names)]
    for name, total in selected.groupby("account", sort=False)["amount"].sum().items():
        balances[str(name)] += float(total)
    return balances


@dataclass(frozen=True)
class StatementSection:
    """One section of a statement (e.g. Assets) with its ordered lines."""

    name: str
    lines: tuple[tuple[str, float], ...]

    @property
    def total(self) -> float:
        total = 0.0
        for _, value in self.lines:
            total += value
        return total


@dataclass(frozen=True)
class FinancialStatement:
    """
    Income statement and balance sheet built from the fixed taxonomy.

    Totals are kept as computed: no assertion is made that
    ``total_assets == total_liabilities + total_equity``. The identity is
    only displayed side by side for the reader to check.
    """

    revenues: StatementSection
    expenses: StatementSection
    assets: StatementSection
    liabilities: StatementSection
    equity: StatementSection

    @property
    def net_income(self) -> float:
        return self.revenues.total - self.expenses.total

    @property
    def total_assets(self) -> float:
        return self.assets.total

    @property
    def total_liabilities(self) -> float:
        return self.liabilities.total

    @property
    def total_equity(self) -> float:
        """Equity accounts plus net income (carried as retained earnings)."""
        return self.equity.total + self.net_income

    @property
    def liabilities_and_equity(self) -> float:
        return self.total_liabilities + self.total_equity


def build_financial_statement(
    frame: pd.DataFrame,
    taxonomy: Optional[dict[str, dict[str, tuple[str, ...]]]] = None,
) -> FinancialStatement:
    """Aggregate ``frame`` into a ``FinancialStatement``."""
    taxonomy = taxonomy or STATEMENT_TAXONOMY
    balances = statement_balances(frame, taxonomy)

    def section(statement: str, name: str) -> StatementSection:
        accounts = taxonomy[statement][name]
        return StatementSection(
            name=name,
            lines=tuple((acc, balances.get(acc, 0.0)) for acc in accounts),
        )

    return FinancialStatement(
        revenues=section("Income Statement", "Revenues"),
        expenses=section("Income Statement", "Expenses"),
        assets=section("Balance Sheet", "Assets"),
        liabilities=section("Balance Sheet", "Liabilities"),
        equity=section("Balance Sheet", "Equity"),
    )
