"""
Process-wide store of named Tables.

Every known table starts as the empty placeholder.  ``load_all`` runs one
load per active table concurrently, joins them, and only then flips
``ready``.  Each slot is written once, by its own load.
"""
from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Iterable, Optional

from .constants import DEFAULT_TABLE_SET, KNOWN_TABLES, TABLE_SETS, week_name
from .io import EMPTY_TABLE, Table, load_table_async

logger = logging.getLogger(__name__)


class TableRegistry:
    def __init__(self, data_dir: Path, active: Optional[Iterable[str]] = None):
        self.data_dir = Path(data_dir)
        if active is None:
            active = TABLE_SETS[DEFAULT_TABLE_SET]
        unknown = set(active) - set(KNOWN_TABLES)
        if unknown:
            raise ValueError(f"Unknown tables: {sorted(unknown)}")
        self.active = frozenset(active)
        self._tables: dict[str, Table] = {name: EMPTY_TABLE for name in KNOWN_TABLES}
        self._ready = False

    @classmethod
    def for_table_set(cls, data_dir: Path, table_set: str) -> "TableRegistry":
        return cls(data_dir, TABLE_SETS[table_set])

    @property
    def ready(self) -> bool:
        return self._ready

    def names(self) -> list[str]:
        return list(KNOWN_TABLES)

    def path_for(self, name: str) -> Path:
        filename, _ = KNOWN_TABLES[name]
        return self.data_dir / filename

    def get(self, name: str) -> Table:
        """Latest loaded table for ``name``, or the placeholder.  KeyError if unknown."""
        return self._tables[name]

    def week(self, number: int) -> Table:
        return self.get(week_name(number))

    async def _load_one(self, name: str) -> None:
        table = await load_table_async(self.path_for(name))
        self._tables[name] = table
        filename = self.path_for(name).name
        if table.is_empty:
            logger.info(f"{filename} not found or empty")
        else:
            logger.info(f"Loaded {filename} successfully")

    async def load_all(self) -> None:
        order = [name for name in KNOWN_TABLES if name in self.active]
        await asyncio.gather(*(self._load_one(name) for name in order))
        self._ready = True
        loaded = sum(1 for name in order if not self._tables[name].is_empty)
        logger.info(f"Table registry ready: {loaded}/{len(order)} tables have data")

    def summary(self) -> list[dict]:
        out = []
        for name, (filename, page) in KNOWN_TABLES.items():
            table = self._tables[name]
            out.append(
                {
                    "name": name,
                    "file": filename,
                    "page": page,
                    "active": name in self.active,
                    "rows": len(table.rows),
                    "columns": len(table.columns),
                }
            )
        return out
