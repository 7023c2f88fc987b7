"""
Shared fixtures: every test gets its own SQLite file under tmp_path.
"""
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from workout_log.main import create_app
from workout_log.schemas import WorkoutDraft
from workout_log.services import WorkoutService
from workout_log.settings import Settings
from workout_log.store import RecordStore

DAY = "2026-03-02"
OTHER_DAY = "2026-03-03"


@pytest_asyncio.fixture
async def store(tmp_path):
    s = RecordStore(f"sqlite+aiosqlite:///{tmp_path / 'store.db'}")
    await s.open()
    yield s
    await s.close()


@pytest_asyncio.fixture
async def service(store):
    svc = WorkoutService(store, selected_date=DAY)
    await svc.reload()
    return svc


@pytest.fixture
def make_draft():
    def _make(name="Squat", *, day=DAY, sets=3, reps=10, comment=""):
        return WorkoutDraft(date=day, name=name, sets=sets, reps=reps, comment=comment)
    return _make


@pytest.fixture
def settings(tmp_path):
    return Settings(DB_PATH=str(tmp_path / "api.db"), API_VERSION="test")


@pytest.fixture
def client(settings):
    # The context manager runs the lifespan: store opened, first reload done
    with TestClient(create_app(settings)) as c:
        yield c
