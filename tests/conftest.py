import pytest
from httpx import ASGITransport, AsyncClient

from todo_api.config import Settings
from todo_api.main import create_app


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"

@pytest.fixture
def settings(tmp_path):
    return Settings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'todos.db'}")

@pytest.fixture
async def initialized_app(settings):
    app = create_app(settings)
    # runs table creation on the way in and disposes the engine on the way out
    async with app.router.lifespan_context(app):
        yield app

@pytest.fixture
async def client(initialized_app):
    transport = ASGITransport(app=initialized_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
