"""
FastAPI wrapper: serves the startup CSV snapshot as JSON plus the static front end.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

from standings.config import Settings
from standings.tables.constants import FIRST_WEEK, KNOWN_TABLES, LAST_WEEK
from standings.tables.registry import TableRegistry

logger = logging.getLogger("uvicorn")

LOG_FORMAT = "%(levelname)s:     %(name)s - %(message)s"

BASE_DIR = Path(__file__).resolve().parent        # standings/api


class TablePayload(BaseModel):
    headers: list[str]
    data: list[dict[str, str]]


class InvalidWeekNumber(ValueError):
    pass


def parse_week_number(raw: str) -> int:
    # plain ASCII digits only: int() would also take "1_5", " 7" and full-width digits
    if not (raw.isascii() and raw.isdigit()):
        raise InvalidWeekNumber(raw)
    week = int(raw)
    if not FIRST_WEEK <= week <= LAST_WEEK:
        raise InvalidWeekNumber(raw)
    return week


def _registry(request: Request) -> TableRegistry:
    return request.app.state.registry


def _log_expected_files(registry: TableRegistry) -> None:
    logger.info("Required CSV files:")
    for name, (filename, page) in KNOWN_TABLES.items():
        if name in registry.active and not name.startswith("week-"):
            logger.info(f"- {filename} (for {page})")
    logger.info(f"- week-X.csv (for individual week pages, X = {FIRST_WEEK}-{LAST_WEEK})")
    logger.info(f"Reading from {registry.data_dir.resolve()}; no fallback files will be used.")


def configure_logging(level: str) -> None:
    """Give the standings.* loggers a level and a console handler; uvicorn only sets up its own."""
    pkg_logger = logging.getLogger("standings")
    pkg_logger.setLevel(level)
    if not pkg_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        pkg_logger.addHandler(handler)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Requests are only accepted once every load has finished
        registry = app.state.registry
        _log_expected_files(registry)
        await registry.load_all()
        yield

    app = FastAPI(title="Standings API", lifespan=lifespan)
    app.state.settings = settings
    app.state.registry = TableRegistry.for_table_set(settings.data_dir, settings.table_set)

    @app.exception_handler(InvalidWeekNumber)
    async def invalid_week(request: Request, exc: InvalidWeekNumber):
        logger.warning(f"Rejected week number {exc}")
        return JSONResponse(status_code=400, content={"error": "Invalid week number"})

    # ── 1.  API routes FIRST ────────────────────────────────────────────
    @app.get("/api/health")
    async def health(request: Request):
        return {"status": "ok", "ready": _registry(request).ready}

    @app.get("/api/tables")
    async def list_tables(request: Request):
        tables = _registry(request).summary()
        return {"tables": tables, "count": len(tables)}

    @app.get("/api/current-standings", response_model=TablePayload)
    async def current_standings(request: Request):
        return _registry(request).get("current-standings").to_payload()

    @app.get("/api/previous-standings", response_model=TablePayload)
    async def previous_standings(request: Request):
        return _registry(request).get("previous-standings").to_payload()

    @app.get("/api/total-points", response_model=TablePayload)
    async def total_points(request: Request):
        return _registry(request).get("total-points").to_payload()

    @app.get("/api/2024-comparison", response_model=TablePayload)
    async def season_comparison(request: Request):
        return _registry(request).get("2024-comparison").to_payload()

    @app.get("/api/all-games", response_model=TablePayload)
    async def all_games(request: Request):
        return _registry(request).get("all-games").to_payload()

    @app.get("/api/week/{week_number}", response_model=TablePayload)
    async def week(request: Request, week_number: str):
        return _registry(request).week(parse_week_number(week_number)).to_payload()

    # ── 2.  CORS for the browser front end ──────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── 3.  STATIC FILES LAST  (won't mask /api now) ────────────────────
    app.mount(
        "/", StaticFiles(directory=BASE_DIR / "Static", html=True), name="static"
    )
    return app


# ── 4.  Local dev entry-point ──────────────────────────────────────────
# Equivalent: uvicorn --factory standings.api.main:create_app
if __name__ == "__main__":
    import uvicorn

    settings = Settings.from_env()
    uvicorn.run(
        "standings.api.main:create_app",  # dotted path from repo root
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=True,
    )
