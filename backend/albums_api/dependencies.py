"""
Albums API — Composition Root
==============================

What:  Builds the object graph a request needs.
How:   Plain constructor calls: session → SqlAlchemyAlbumRepository → AlbumService.
       FastAPI only supplies the per-request session; nothing is resolved by type.
Who:   Route handlers declare `Depends(get_album_service)`.

Tests swap the whole graph with
    app.dependency_overrides[get_album_service] = lambda: AlbumService(FakeAlbumRepository(...))
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from albums_api.database import get_db_session
from albums_api.repositories.album_repository import SqlAlchemyAlbumRepository
from albums_api.services.album_service import AlbumService


def get_album_service(db: AsyncSession = Depends(get_db_session)) -> AlbumService:
    return AlbumService(SqlAlchemyAlbumRepository(db))
