import pandas as pd
import pytest

from ledger_reports.io import (
    LEDGER_COLUMNS,
    parse_records,
    read_ledger_file,
    records_to_frame,
    write_report,
)


def test_parse_records_ignores_trailing_newline() -> None:
    """The final empty line of a file must not become a record."""
    text = "2023-01-01,Cash,Opening,100,0\n2023-01-02,Inventory,Stock,50,0\n"

    records = parse_records(text)

    assert records == [
        ("2023-01-01", "Cash", "Opening", "100", "0"),
        ("2023-01-02", "Inventory", "Stock", "50", "0"),
    ]


@pytest.mark.parametrize("text", ["", "\n", "   \n\n"])
def test_parse_records_empty_file(text) -> None:
    assert parse_records(text) == []


def test_parse_records_keeps_internal_whitespace_and_short_rows() -> None:
    records = parse_records("2023-01-01, Cash ,x\n2023-01-02,Cash")

    assert records[0] == ("2023-01-01", " Cash ", "x")
    assert records[1] == ("2023-01-02", "Cash")


def test_parse_records_handles_crlf() -> None:
    records = parse_records("2023-01-01,Cash,,1,0\r\n2023-01-02,Cash,,2,0\r\n")

    assert records[0][-1] == "0"
    assert len(records) == 2


def test_records_to_frame_pads_and_truncates() -> None:
    """Short rows are padded with None, extra fields are dropped."""
    df = records_to_frame(
        [("2023-01-01", "Cash"), ("2023-01-02", "Cash", "d", "1", "2", "extra")]
    )

    assert list(df.columns) == LEDGER_COLUMNS
    assert df.loc[0, "debit"] is None
    assert df.loc[0, "credit"] is None
    assert df.loc[1, "credit"] == "2"


def test_records_to_frame_empty() -> None:
    df = records_to_frame([])

    assert df.empty
    assert list(df.columns) == LEDGER_COLUMNS


def test_read_ledger_file(tmp_path) -> None:
    path = tmp_path / "a.csv"
    path.write_text("2023-01-01,Cash,,100,0\n", encoding="utf-8")

    df = read_ledger_file(path)

    assert isinstance(df, pd.DataFrame)
    assert df.loc[0, "account"] == "Cash"
    assert df.loc[0, "debit"] == "100"


def test_read_ledger_file_missing(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        read_ledger_file(tmp_path / "missing.csv")


def test_write_report_joins_lines_without_trailing_newline(tmp_path) -> None:
    target = tmp_path / "nested" / "accounts.csv"

    written = write_report(target, ["Account,Balance", "Cash,1.00"])

    assert written == target
    assert target.read_bytes() == b"Account,Balance\nCash,1.00"
    # No temporary file is left behind.
    assert [p.name for p in target.parent.iterdir()] == ["accounts.csv"]


def test_write_report_replaces_previous_content(tmp_path) -> None:
    target = tmp_path / "yearly.csv"
    target.write_text("old content", encoding="utf-8")

    write_report(target, ["Financial Year,Cash Balance"])

    assert target.read_text(encoding="utf-8") == "Financial Year,Cash Balance"


@pytest.mark.parametrize("separator", ["\x0c", "\x0b", "\x1c", "\x85", "\u2028"])
def test_parse_records_splits_on_newline_only(separator) -> None:
    """Form feeds and Unicode separators inside a field do not end the record."""
    text = (
        f"2023-01-01,Cash,rent{separator}june,100,0\n"
        "2023-01-02,Cash,deposit,50,0\n"
    )

    records = parse_records(text)

    assert len(records) == 2
    assert records[0] == ("2023-01-01", "Cash", f"rent{separator}june", "100", "0")
