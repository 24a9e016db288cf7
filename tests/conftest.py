"""Root conftest: shared test configuration and fixtures.

Every test gets its own SQLite file under tmp_path, so tests never share rows.
"""

import os

# Must be set before src.core.config is imported anywhere
os.environ.setdefault("ASYNC_DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")

import pytest
from httpx import ASGITransport, AsyncClient

from src.core.database import Database
from src.apps.blog.container import BlogServices
from src.apps.blog.schemas.post import PostCreate
from src.main import create_app


@pytest.fixture
async def database(tmp_path):
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'blog.db'}")
    await db.create_all()
    yield db
    await db.disconnect()


@pytest.fixture
def services(database):
    return BlogServices.build(database.get_session, default_category_name="Uncategorized")


@pytest.fixture
async def client(database):
    """API client over the app built around the per-test database."""
    app = create_app(database)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def make_post(services):
    """Create a post through the service layer."""
    async def _make(title="Title", content="Content", category_id=None):
        return await services.posts.create_post(
            PostCreate(title=title, content=content, category_id=category_id)
        )
    return _make
