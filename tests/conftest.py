import asyncio
import os
import sys
import tempfile
from pathlib import Path
from typing import Any, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import NullPool

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

# The module-level engine in database.py must never touch a real database file
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{Path(tempfile.gettempdir()) / 'slidesmith-test-default.db'}"

from database import create_database_engine, create_session_factory, get_async_db, init_database  # noqa: E402
from services.generation.config.config_loader import GenerationConfig  # noqa: E402
from services.generation.drivers import GenerationDriver  # noqa: E402
from services.generation.parser import GenerationError  # noqa: E402
from services.generation.service import ContentGenerationService, get_generation_service  # noqa: E402
from shared import cache  # noqa: E402
from shared.utils import setup_logging  # noqa: E402


class FakeDriver(GenerationDriver):
    """Replays scripted replies; with nothing scripted it fails like an unreachable model."""

    def __init__(self, responses: list[str] | None = None, error: Exception | None = None):
        self.responses = list(responses or [])
        self.error = error
        self.prompts: list[str] = []
        self.step_configs: list[dict[str, Any]] = []

    async def complete(self, prompt: str, step_config: dict[str, Any]) -> str:
        self.prompts.append(prompt)
        self.step_configs.append(step_config)
        if self.error is not None:
            raise self.error
        if not self.responses:
            raise GenerationError("No scripted response")
        return self.responses.pop(0)


@pytest.fixture
def fake_driver() -> FakeDriver:
    return FakeDriver()


@pytest.fixture
def generation_service(fake_driver: FakeDriver) -> ContentGenerationService:
    return ContentGenerationService(setup_logging("test-generation"), driver=fake_driver, generation_config=GenerationConfig())


@pytest.fixture
def db_engine(tmp_path: Path):
    """Fresh SQLite file per test; NullPool so each event loop opens its own connections."""
    engine = create_database_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool)
    asyncio.run(init_database(engine))
    yield engine
    asyncio.run(engine.dispose())


@pytest.fixture
def session_factory(db_engine):
    return create_session_factory(db_engine)


@pytest.fixture
def invalidations() -> Generator[list[str], None, None]:
    """Detail paths signalled as stale while the test runs."""
    paths: list[str] = []
    cache.subscribe(paths.append)
    yield paths
    cache.unsubscribe(paths.append)


def bind_test_dependencies(app, session_factory, generation_service) -> None:
    """Point an app at the per-test database and the fake generation driver."""

    async def _get_test_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_async_db] = _get_test_db
    app.dependency_overrides[get_generation_service] = lambda: generation_service


@pytest.fixture
def client(session_factory, generation_service) -> Generator[TestClient, None, None]:
    """Gateway client bound to the per-test database and the fake generation driver."""
    from app import app

    bind_test_dependencies(app, session_factory, generation_service)
    try:
        # No context manager: the lifespan would initialize the default database
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
