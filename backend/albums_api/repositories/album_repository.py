"""
Albums API — Album Repository
==============================

What:  The Store port (AlbumRepository) and its SQLAlchemy implementation.
How:   SqlAlchemyAlbumRepository wraps the request's AsyncSession. Transaction
       boundaries stay with get_db_session (commit on success, rollback on error).
Who:   Constructed in albums_api.dependencies; called by AlbumService.

Query plans:
    find_all:        SELECT ... FROM albums ORDER BY id
    find_by_id:      primary key lookup (session identity map first)
    find_by_artist:  SELECT ... WHERE artist = :artist ORDER BY id  (idx_albums_artist)
    exists:          SELECT EXISTS (SELECT 1 FROM albums WHERE id = :id)
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from albums_api.models.album import Album


class AlbumRepository(ABC):
    """Abstract persistent collection of albums keyed by integer id."""

    @abstractmethod
    async def find_all(self) -> List[Album]:
        """Return every album, ordered by id."""

    @abstractmethod
    async def find_by_id(self, album_id: int) -> Optional[Album]:
        """Return the album with this id, or None."""

    @abstractmethod
    async def find_by_artist(self, artist: str) -> List[Album]:
        """Return albums whose artist equals `artist` exactly, ordered by id."""

    @abstractmethod
    async def exists(self, album_id: int) -> bool:
        """Return True if an album with this id is stored."""

    @abstractmethod
    async def add(self, album: Album) -> Album:
        """Persist a new album and return it with its generated id."""


class SqlAlchemyAlbumRepository(AlbumRepository):

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_all(self) -> List[Album]:
        result = await self._session.execute(select(Album).order_by(Album.id))
        return list(result.scalars().all())

    async def find_by_id(self, album_id: int) -> Optional[Album]:
        return await self._session.get(Album, album_id)

    async def find_by_artist(self, artist: str) -> List[Album]:
        result = await self._session.execute(
            select(Album).where(Album.artist == artist).order_by(Album.id)
        )
        return list(result.scalars().all())

    async def exists(self, album_id: int) -> bool:
        found = await self._session.scalar(
            select(exists().where(Album.id == album_id))
        )
        return bool(found)

    async def add(self, album: Album) -> Album:
        self._session.add(album)
        # flush assigns the autoincrement id without committing
        await self._session.flush()
        return album
