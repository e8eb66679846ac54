import httpx
import pytest
import pytest_asyncio
from sqlalchemy.pool import StaticPool

from app.db import create_tables, make_engine, make_sessionmaker
from app.dependencies import get_directory
from app.main import app
from app.schemas.students import StudentPayload
from app.services.student_directory import StudentDirectory

# In-memory SQLite shared across sessions of one test
TEST_DATABASE_URL = "sqlite+aiosqlite://"


class FakeClock:
    """Deterministic nanosecond clock; each read advances by ``step``."""

    def __init__(self, start: int = 1_700_000_000_000_000_000, step: int = 1_000):
        self.now = start
        self.step = step

    def __call__(self) -> int:
        value = self.now
        self.now += self.step
        return value


@pytest_asyncio.fixture
async def engine():
    test_engine = make_engine(TEST_DATABASE_URL, poolclass=StaticPool)
    await create_tables(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return make_sessionmaker(engine)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def directory(session_factory, clock):
    return StudentDirectory(session_factory, clock=clock)


@pytest_asyncio.fixture
async def client(directory):
    app.dependency_overrides[get_directory] = lambda: directory
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def ann():
    return StudentPayload(name="Ann", email="a@x.com", age="20", hobby="chess")
