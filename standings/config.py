"""
Runtime settings, read from the environment (and a local .env if present).
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from standings.tables.constants import DEFAULT_TABLE_SET, TABLE_SETS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 3000
    data_dir: Path = Path(".")
    table_set: str = DEFAULT_TABLE_SET
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        # .env next to the data, i.e. in the working directory
        load_dotenv(find_dotenv(usecwd=True))

        table_set = os.getenv("STANDINGS_TABLE_SET", DEFAULT_TABLE_SET).strip().lower()
        if table_set not in TABLE_SETS:
            logger.warning(
                f"Unknown STANDINGS_TABLE_SET={table_set!r}, using {DEFAULT_TABLE_SET!r}. "
                f"Choices: {sorted(TABLE_SETS)}"
            )
            table_set = DEFAULT_TABLE_SET

        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", 3000)),
            data_dir=Path(os.getenv("STANDINGS_DATA_DIR", Path.cwd())),
            table_set=table_set,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
