"""
Read one CSV into a Table.  The loaders never raise: a missing or broken
file comes back as the empty Table and a log line says why.
Put the CSV files inside the configured data directory.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path

import pandas as pd

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Table:
    """Header-ordered columns plus one mapping per data row, all cells as text."""

    columns: tuple[str, ...] = ()
    rows: tuple[dict[str, str], ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not self.columns

    def to_payload(self) -> dict[str, list]:
        # the JSON shape the front end expects
        return {"headers": list(self.columns), "data": [dict(r) for r in self.rows]}


EMPTY_TABLE = Table()


def _frame_to_table(df: pd.DataFrame) -> Table:
    # df holds the raw lines: row 0 is the header exactly as written
    if len(df.index) < 2:
        return EMPTY_TABLE
    lines = df.fillna("").values.tolist()
    header = [str(name) for name in lines[0]]
    # a repeated header name keeps its first position and its last value
    rows = tuple(dict(zip(header, values)) for values in lines[1:])
    return Table(columns=tuple(dict.fromkeys(header)), rows=rows)


def load_table(path: Path) -> Table:
    path = Path(path)
    if not path.exists():
        logger.info(f"No {path.name} file found.")
        return EMPTY_TABLE

    try:
        # header=None keeps the header row verbatim; a row wider than it raises ParserError
        df = pd.read_csv(path, header=None, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError:
        logger.info(f"{path.name} is empty.")
        return EMPTY_TABLE
    except (ValueError, OSError) as e:
        # ParserError and UnicodeDecodeError are both ValueErrors
        logger.error(f"Error loading {path.name}: {e}")
        return EMPTY_TABLE

    table = _frame_to_table(df)
    logger.info(f"Loaded {path.name}: {len(table.rows)} rows, {len(table.columns)} columns")
    return table


async def load_table_async(path: Path) -> Table:
    """Same as load_table, with the blocking parse pushed to a worker thread."""
    return await asyncio.to_thread(load_table, path)
