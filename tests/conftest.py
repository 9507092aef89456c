from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from standings.api.main import create_app
from standings.config import Settings


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    d = tmp_path / "data"
    d.mkdir()
    return d


@pytest.fixture
def write_csv(data_dir: Path):
    def _write(filename: str, text: str) -> Path:
        path = data_dir / filename
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_client(data_dir: Path):
    clients = []

    def _make(table_set: str = "full") -> TestClient:
        app = create_app(Settings(data_dir=data_dir, table_set=table_set))
        client = TestClient(app)
        client.__enter__()  # runs the lifespan, so every table is loaded
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.__exit__(None, None, None)
