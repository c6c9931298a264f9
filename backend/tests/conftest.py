"""
Albums API — Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── fake_repository: In-memory AlbumRepository (no database)
    ├── album_service:   AlbumService over fake_repository
    ├── fake_client:     HTTPX AsyncClient whose app uses fake_repository
    ├── database:        Creates/drops the albums table in the SQLite test DB
    └── db_client:       HTTPX AsyncClient going through the real SQLAlchemy repository
"""

import datetime
import os
import tempfile
from typing import Dict, List, Optional

# Must run before any albums_api import: settings and the engine are built
# at import time from these variables.
_test_dir = tempfile.mkdtemp(prefix="albums_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_test_dir, 'test.db')}"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from albums_api.dependencies import get_album_service
from albums_api.models.album import Album
from albums_api.repositories.album_repository import AlbumRepository
from albums_api.services.album_service import AlbumService


class FakeAlbumRepository(AlbumRepository):
    """
    In-memory AlbumRepository.

    Keeps albums in a dict keyed by id and hands out ids in insertion order,
    like the autoincrement column does.
    """

    def __init__(self) -> None:
        self._store: Dict[int, Album] = {}
        self._next_id = 1

    def seed(self, name: str, artist: str, date: datetime.date) -> Album:
        album = Album(id=self._next_id, name=name, artist=artist, date=date)
        self._store[album.id] = album
        self._next_id += 1
        return album

    async def find_all(self) -> List[Album]:
        return [self._store[key] for key in sorted(self._store)]

    async def find_by_id(self, album_id: int) -> Optional[Album]:
        return self._store.get(album_id)

    async def find_by_artist(self, artist: str) -> List[Album]:
        return [album for album in await self.find_all() if album.artist == artist]

    async def exists(self, album_id: int) -> bool:
        return album_id in self._store

    async def add(self, album: Album) -> Album:
        album.id = self._next_id
        self._store[album.id] = album
        self._next_id += 1
        return album


OK_COMPUTER = {
    "name": "OK Computer",
    "artist": "Radiohead",
    "date": datetime.date(1997, 5, 21),
}


# ══════════════════════════════════════════════════════════════════════════
# In-memory fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def sample_album_data():
    """Field values of the album used across the suite."""
    return dict(OK_COMPUTER)


@pytest.fixture
def fake_repository():
    """Empty in-memory store. Tests add rows with fake_repository.seed(...)."""
    return FakeAlbumRepository()


@pytest.fixture
def album_service(fake_repository):
    return AlbumService(fake_repository)


@pytest_asyncio.fixture
async def fake_client(fake_repository):
    """
    HTTPX AsyncClient against the app, with the composition root replaced so
    that every request uses fake_repository.

    Usage:
        async def test_list(fake_client, fake_repository):
            fake_repository.seed(**OK_COMPUTER)
            response = await fake_client.get("/albums")
    """
    from albums_api.main import app

    app.dependency_overrides[get_album_service] = lambda: AlbumService(fake_repository)
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.clear()


# ══════════════════════════════════════════════════════════════════════════
# SQLite-backed fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def database():
    """Creates the schema before the test and drops it afterwards."""
    from albums_api.database import Base, engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture
async def seed_album(database):
    """Returns a coroutine function that inserts one album and returns its id."""
    from albums_api.database import async_session_factory

    async def _seed(name: str, artist: str, date: datetime.date) -> int:
        async with async_session_factory() as session:
            album = Album(name=name, artist=artist, date=date)
            session.add(album)
            await session.commit()
            return album.id

    return _seed


@pytest_asyncio.fixture
async def db_client(database):
    """HTTPX AsyncClient using the real composition root and the SQLite database."""
    from albums_api.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
