import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from contact_backend.config import Config, DBConfig, ServerConfig
from contact_backend.core.db_manager import DatabaseManager
from contact_backend.core.gateways import ContactMessageGateway
from contact_backend.main import create_app

INDEX_HTML = "<!DOCTYPE html><html><body><h1>Test contact page</h1></body></html>"


@pytest.fixture
def static_dir(tmp_path):
    directory = tmp_path / "public"
    directory.mkdir()
    (directory / "index.html").write_text(INDEX_HTML)
    (directory / "styles.css").write_text("body { color: black; }")
    return directory


@pytest.fixture
def config(tmp_path, static_dir):
    return Config(
        server=ServerConfig(static_dir=str(static_dir)),
        db=DBConfig(path=str(tmp_path / "db" / "contact.db"))
    )


@pytest_asyncio.fixture
async def db_manager(config):
    manager = DatabaseManager(config)
    await manager.create_tables()
    yield manager
    await manager.close()


@pytest.fixture
def gateway(db_manager):
    return ContactMessageGateway(db_manager)


@pytest_asyncio.fixture
async def app(config):
    app = await create_app(config)
    async with app.router.lifespan_context(app):
        yield app


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        yield client


@pytest_asyncio.fixture
async def stored_count(app):
    """Counts rows through the app's own database manager."""
    db_manager = await app.state.dishka_container.get(DatabaseManager)
    gateway = ContactMessageGateway(db_manager)

    async def count() -> int:
        return await gateway.count_messages()

    return count
