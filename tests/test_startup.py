"""
Startup connection tests - an unreachable store must stop the process
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from users_api.app import create_app
from users_api.database import connection
from users_api.database.connection import DatabaseConnectionError, init_database
from users_api.repositories import InMemoryUserRepository, MongoUserRepository

# Nothing listens on port 1; the server selection timeout keeps tests fast
UNREACHABLE_URI = "mongodb://127.0.0.1:1/users_api_test"
TIMEOUT_MS = 300

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class TrackingRepository(InMemoryUserRepository):
    def __init__(self):
        super().__init__()
        self.events = []

    async def connect(self):
        self.events.append("connect")

    async def close(self):
        self.events.append("close")


class TestInitDatabase:

    @pytest.mark.asyncio
    async def test_unreachable_store_raises(self):
        with pytest.raises(DatabaseConnectionError, match="Could not connect to MongoDB"):
            await init_database(UNREACHABLE_URI, timeout_ms=TIMEOUT_MS)

        assert connection.get_client() is None

    @pytest.mark.asyncio
    async def test_close_without_client_is_safe(self):
        await connection.close_database()

        assert connection.get_client() is None


class TestLifespan:

    def test_connects_on_startup_and_closes_on_shutdown(self):
        repository = TrackingRepository()

        with TestClient(create_app(repository)) as client:
            assert repository.events == ["connect"]
            assert client.get("/api/users").status_code == 200

        assert repository.events == ["connect", "close"]

    def test_unreachable_store_aborts_startup(self):
        app = create_app(MongoUserRepository(uri=UNREACHABLE_URI, timeout_ms=TIMEOUT_MS))

        with pytest.raises(DatabaseConnectionError):
            with TestClient(app):
                pass


class TestEntryPoint:

    def test_process_exits_non_zero_when_store_unreachable(self, unused_tcp_port):
        env = dict(
            os.environ,
            MONGODB_URI=UNREACHABLE_URI,
            MONGODB_TIMEOUT_MS=str(TIMEOUT_MS),
            USER_REPOSITORY="mongodb",
            HOST="127.0.0.1",
            PORT=str(unused_tcp_port),
        )

        completed = subprocess.run(
            [sys.executable, "main.py"],
            cwd=PROJECT_ROOT,
            env=env,
            capture_output=True,
            text=True,
            timeout=60,
        )

        assert completed.returncode != 0
        assert "Uvicorn running on" not in completed.stderr
