from ledger_reports.cache import LedgerCache
from ledger_reports.io import LEDGER_COLUMNS, records_to_frame


def _rows(*records):
    return records_to_frame(list(records))


def test_replace_swaps_content_and_bumps_generation() -> None:
    cache = LedgerCache()
    cache.set("old.csv", _rows(("2022-01-01", "Cash", "", "1", "0")))
    start = cache.generation

    cache.replace({"new.csv": _rows(("2023-01-01", "Cash", "", "2", "0"))})

    assert "old.csv" not in cache
    assert list(cache) == ["new.csv"]
    assert cache.generation == start + 1


def test_clear_empties_cache() -> None:
    cache = LedgerCache()
    cache.set("a.csv", _rows(("2023-01-01", "Cash", "", "1", "0")))

    cache.clear()

    assert len(cache) == 0
    assert cache.get("a.csv") is None


def test_frame_concatenates_in_cache_order_and_excludes() -> None:
    cache = LedgerCache()
    cache.replace(
        {
            "a.csv": _rows(("2023-01-01", "Cash", "", "1", "0")),
            "fs.csv": _rows(("Total Assets", "1.00")),
            "b.csv": _rows(("2023-01-02", "Inventory", "", "2", "0")),
        }
    )

    full = cache.frame()
    filtered = cache.frame(exclude="fs.csv")

    assert list(full["source"]) == ["a.csv", "fs.csv", "b.csv"]
    assert list(filtered["account"]) == ["Cash", "Inventory"]


def test_frame_of_empty_cache_has_ledger_columns() -> None:
    df = LedgerCache().frame()

    assert df.empty
    assert list(df.columns) == [*LEDGER_COLUMNS, "source"]


def test_items_is_a_snapshot_in_load_order() -> None:
    cache = LedgerCache()
    a = _rows(("2023-01-01", "Cash", "", "1", "0"))
    b = _rows(("2023-01-02", "Cash", "", "2", "0"))
    cache.replace({"b.csv": b, "a.csv": a})

    items = cache.items()
    cache.clear()

    assert [name for name, _ in items] == ["b.csv", "a.csv"]
    assert items[1][1] is a
    assert cache.items() == []
