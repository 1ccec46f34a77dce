# Ledger Reports - Ledger ingestion & financial reporting engine
# Copyright (c) 2025 Maxence Bernard (maxencebernardhub)
# Licensed under the MIT License. See LICENSE file for details.

"""
Report rendering for Ledger Reports.

Turns the results of ``engine`` into the lines of the three output files.
Every renderer returns a list of lines; ``io.write_report`` joins them with
``\\n`` when writing. Monetary values always have exactly two decimals.

- accounts.csv: ``Account,Balance`` then one line per account,
- yearly.csv:   ``Financial Year,Cash Balance`` then one line per year,
- fs.csv:       income statement, balance sheet and a final
                ``Assets = Liabilities + Equity`` line showing both sides.

Negative zero
-------------
A balance that is a tiny negative float residue (e.g. ``0.3 - 0.1 - 0.2``)
would format as ``-0.00``. ``format_amount`` prints ``0.00`` instead, so a
zero balance reads the same whatever the order of the additions. Plain
``toFixed``-style formatting would keep the minus sign.
"""

import pandas as pd

from .engine import FinancialStatement, StatementSection


def format_amount(value: float) -> str:
    """Format a monetary value with two decimals (``-0.00`` becomes ``0.00``)."""
    text = f"{float(value):.2f}"
    if text == "-0.00":
        return "0.00"
    return text


def render_account_balances(balances: pd.Series) -> list[str]:
    """Render the account balances report, keeping the series order."""
    lines = ["Account,Balance"]
    for account, balance in balances.items():
        lines.append(f"{account},{format_amount(balance)}")
    return lines


def render_yearly_cash(by_year: pd.Series) -> list[str]:
    """Render the yearly cash flow report, keeping the series order."""
    lines = ["Financial Year,Cash Balance"]
    for year, balance in by_year.items():
        lines.append(f"{year},{format_amount(balance)}")
    return lines


def _section_lines(section: StatementSection) -> list[str]:
    return [f"{account},{format_amount(value)}" for account, value in section.lines]


def render_financial_statement(statement: FinancialStatement) -> list[str]:
    """
    Render the basic financial statement.

    The last line prints ``total assets`` and ``total liabilities + total
    equity`` next to each other. It is informational only: nothing fails
    when the two sides differ.
    """
    net_income = statement.net_income

    lines = ["Basic Financial Statement", "", "Income Statement"]
    lines += _section_lines(statement.revenues)
    lines += _section_lines(statement.expenses)
    lines += [f"Net Income,{format_amount(net_income)}", "", "Balance Sheet"]

    lines.append("Assets")
    lines += _section_lines(statement.assets)
    lines += [f"Total Assets,{format_amount(statement.total_assets)}", ""]

    lines.append("Liabilities")
    lines += _section_lines(statement.liabilities)
    lines += [f"Total Liabilities,{format_amount(statement.total_liabilities)}", ""]

    lines.append("Equity")
    lines += _section_lines(statement.equity)
    lines.append(f"Retained Earnings (Net Income),{format_amount(net_income)}")
    lines += [f"Total Equity,{format_amount(statement.total_equity)}", ""]

    lines.append(
        "Assets = Liabilities + Equity, "
        f"{format_amount(statement.total_assets)} = "
        f"{format_amount(statement.liabilities_and_equity)}"
    )
    return lines
