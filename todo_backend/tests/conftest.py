from pathlib import Path

import pytest

from src.persistence.db import connect
from src.persistence.gateway import PersistenceGateway

_SCHEMA = Path(__file__).resolve().parent.parent / "schema.sql"


class RecordingLogger:
    """Minimal logger double collecting info() messages."""

    def __init__(self):
        self.messages = []

    def info(self, message):
        self.messages.append(message)


@pytest.fixture()
def db_path(tmp_path):
    path = tmp_path / "todos_test.db"
    conn = connect(str(path))
    try:
        conn.executescript(_SCHEMA.read_text(encoding="utf-8"))
    finally:
        conn.close()
    return str(path)


@pytest.fixture()
def conn(db_path):
    connection = connect(db_path)
    yield connection
    connection.close()


@pytest.fixture()
def recording_logger():
    return RecordingLogger()


@pytest.fixture()
def gateway(recording_logger, conn):
    return PersistenceGateway(recording_logger, conn)


@pytest.fixture()
def make_list(gateway):
    """Create a list and return its record, looked up by name."""

    def _make(name):
        gateway.create_list(name)
        return gateway.find_list_by_name(name)

    return _make
