import pytest
from httpx import ASGITransport, AsyncClient

from todoserver.config import Settings
from todoserver.main import create_app
from todoserver.repositories.memory_repo import InMemoryTodoStore
from todoserver.repositories.todo_repo import SqlTodoStore

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"

@pytest.fixture(params=["memory", "sql"])
async def store(request):
    if request.param == "memory":
        todo_store = InMemoryTodoStore()
    else:
        todo_store = SqlTodoStore.from_url(TEST_DATABASE_URL)
    await todo_store.create_schema()
    yield todo_store
    await todo_store.close()

@pytest.fixture
def settings(store):
    backend = "memory" if isinstance(store, InMemoryTodoStore) else "sql"
    return Settings(backend=backend, database_url=TEST_DATABASE_URL)

@pytest.fixture
async def client(store, settings):
    app = create_app(store=store, settings=settings)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
