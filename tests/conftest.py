import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from app.main import app
from app.core.database import get_executor
from tests.fakes import FakeExecutor


@pytest.fixture
def executor():
    return FakeExecutor()


# Client talks to the app with the pool swapped for the fake executor
@pytest_asyncio.fixture(scope="function")
async def client(executor: FakeExecutor):
    async def override_get_executor():
        return executor

    app.dependency_overrides[get_executor] = override_get_executor

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
