import pytest

from app.core.config import get_settings
from app.core.http import create_http_client
from app.db.session import create_engine, create_session_maker, init_db
from app.main import create_app
from app.services.history import HistoryStore


@pytest.fixture(autouse=True)
def settings(tmp_path, monkeypatch):
    monkeypatch.setenv("WEATHERAPP_DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'weather.db'}")
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest.fixture
async def store(settings):
    engine = create_engine(settings)
    await init_db(engine)
    try:
        yield HistoryStore(create_session_maker(engine))
    finally:
        await engine.dispose()


@pytest.fixture
async def http_client(settings):
    async with create_http_client(settings) as client:
        yield client


@pytest.fixture
def app(settings):
    return create_app()


@pytest.fixture
async def api(app):
    from httpx import ASGITransport, AsyncClient

    async with app.router.lifespan_context(app):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            yield client
