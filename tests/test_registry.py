import asyncio

import pytest

from standings.tables.constants import KNOWN_TABLES, TABLE_SETS
from standings.tables.io import EMPTY_TABLE
from standings.tables.registry import TableRegistry


def test_placeholders_before_loading(write_csv, data_dir):
    write_csv("current-standings.csv", "Team,Pts\nBears,10\n")
    registry = TableRegistry(data_dir)

    assert not registry.ready
    assert registry.get("current-standings") == EMPTY_TABLE
    assert registry.week(1) == EMPTY_TABLE


def test_load_all_fills_slots(write_csv, data_dir):
    write_csv("current-standings.csv", "Team,Pts\nBears,10\n")
    write_csv("week-3.csv", "Home,Away\nBears,Lions\n")
    registry = TableRegistry(data_dir)

    asyncio.run(registry.load_all())

    assert registry.ready
    assert registry.get("current-standings").rows == ({"Team": "Bears", "Pts": "10"},)
    assert registry.week(3).columns == ("Home", "Away")
    assert registry.week(4) == EMPTY_TABLE
    assert registry.get("all-games") == EMPTY_TABLE


def test_core_set_skips_variant_tables(write_csv, data_dir):
    write_csv("previous-standings.csv", "Team,Pts\nBears,7\n")
    write_csv("total-points.csv", "Team,Total\nBears,70\n")
    registry = TableRegistry.for_table_set(data_dir, "core")

    asyncio.run(registry.load_all())

    assert registry.get("previous-standings") == EMPTY_TABLE
    assert not registry.get("total-points").is_empty


def test_names_cover_fixed_and_weekly_tables(data_dir):
    names = TableRegistry(data_dir).names()
    assert names[:5] == [
        "current-standings",
        "previous-standings",
        "total-points",
        "2024-comparison",
        "all-games",
    ]
    assert names[5:] == [f"week-{w}" for w in range(1, 16)]


def test_unknown_names_are_rejected(data_dir):
    with pytest.raises(KeyError):
        TableRegistry(data_dir).get("week-16")
    with pytest.raises(ValueError):
        TableRegistry(data_dir, active={"season-recap"})


def test_summary_reports_counts(write_csv, data_dir):
    write_csv("total-points.csv", "Team,Total\nBears,70\nLions,64\n")
    registry = TableRegistry.for_table_set(data_dir, "core")
    asyncio.run(registry.load_all())

    summary = {entry["name"]: entry for entry in registry.summary()}
    assert len(summary) == len(KNOWN_TABLES)
    assert summary["total-points"]["rows"] == 2
    assert summary["total-points"]["columns"] == 2
    assert summary["all-games"]["active"] is False
    assert summary["week-15"]["file"] == "week-15.csv"


def test_full_set_is_every_known_table():
    assert TABLE_SETS["full"] == frozenset(KNOWN_TABLES)
    assert TABLE_SETS["core"] < TABLE_SETS["full"]
