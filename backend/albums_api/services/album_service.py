"""
Albums API — Album Service (Query Handler)
===========================================

What:  Resolves the album read operations and album creation against the Store.
How:   Holds an AlbumRepository passed in by the caller; converts ORM rows into
       AlbumResponse schemas.
Who:   Built per request by albums_api.dependencies.get_album_service.

Single-item lookup flow (GET /albums/{id}):
    ┌──────────┐    ┌──────────────────┐  yes  ┌──────────────┐
    │  Route   │───▶│ exists(album_id) │──────▶│ find_by_id   │──▶ 200 AlbumResponse
    └──────────┘    └──────────────────┘       └──────────────┘
                             │ no
                             ▼
                 UnprocessableEntityError ──▶ global handler ──▶ 422 ExceptionMessage

Error Handling:
    UnprocessableEntityError and ValidationError propagate unchanged.
    SQLAlchemy failures are wrapped in DatabaseError; driver details go to
    the log and to the error's context only.
"""

import datetime
import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from albums_api.exceptions import (
    DatabaseError,
    UnprocessableEntityError,
    ValidationError,
)
from albums_api.models.album import ID_MAX, ID_MIN, Album
from albums_api.repositories.album_repository import AlbumRepository
from albums_api.schemas.album import AlbumCreate, AlbumResponse

logger = logging.getLogger(__name__)


class AlbumService:
    """
    Business logic layer for album operations.

    Responsibilities:
        - list_all(): every album, ordered by id
        - get_by_id(): existence guard, then fetch
        - list_by_artist(): exact artist match
        - create_album(): release date rule, then persist
    """

    def __init__(self, repository: AlbumRepository) -> None:
        self.repository = repository

    async def list_all(self) -> List[AlbumResponse]:
        """Return every stored album. An empty store yields an empty list."""
        try:
            albums = await self.repository.find_all()
        except SQLAlchemyError as e:
            logger.error("Database error listing albums: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve albums. Please try again.",
                context={"error_type": type(e).__name__},
            )
        return [AlbumResponse.model_validate(album) for album in albums]

    async def exists(self, album_id: int) -> bool:
        """
        Existence guard for single-item lookups.

        Ids outside the INTEGER key range cannot be stored, so they are
        reported absent without a query; drivers reject them as parameters.
        """
        if not ID_MIN <= album_id <= ID_MAX:
            return False
        try:
            return await self.repository.exists(album_id)
        except SQLAlchemyError as e:
            logger.error("Database error checking album %s: %s", album_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the album. Please try again.",
                context={"album_id": album_id},
            )

    async def get_by_id(self, album_id: int) -> AlbumResponse:
        """
        Retrieve a single album by id.

        Raises:
            UnprocessableEntityError: No album with this id (→ 422)
            DatabaseError: Query execution failed (→ 500)
        """
        if not await self.exists(album_id):
            logger.info("Album %s does not exist", album_id)
            raise UnprocessableEntityError.for_missing_id(album_id)

        try:
            album = await self.repository.find_by_id(album_id)
        except SQLAlchemyError as e:
            logger.error("Database error fetching album %s: %s", album_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the album. Please try again.",
                context={"album_id": album_id},
            )

        # The guard and the fetch are not atomic; a row removed in between
        # is reported the same way as one that never existed.
        if album is None:
            raise UnprocessableEntityError.for_missing_id(album_id)

        return AlbumResponse.model_validate(album)

    async def list_by_artist(self, artist: str) -> List[AlbumResponse]:
        """Albums whose artist equals `artist` (case-sensitive). Never raises for no match."""
        try:
            albums = await self.repository.find_by_artist(artist)
        except SQLAlchemyError as e:
            logger.error("Database error listing albums for artist %r: %s", artist, str(e))
            raise DatabaseError(
                message="Could not retrieve albums. Please try again.",
                context={"artist": artist},
            )
        return [AlbumResponse.model_validate(album) for album in albums]

    async def create_album(
        self,
        payload: AlbumCreate,
        today: Optional[datetime.date] = None,
    ) -> AlbumResponse:
        """
        Validate and store a new album.

        Length and blank checks already ran on the request schema; the
        release date rule depends on the current date, so it runs here.

        Raises:
            ValidationError: Release date is today or later (→ 400)
            DatabaseError: Insert failed (→ 500)
        """
        today = today or datetime.date.today()
        if payload.date >= today:
            raise ValidationError(
                message=f"Release date {payload.date.isoformat()} must be in the past",
                field="date",
            )

        album = Album(name=payload.name, artist=payload.artist, date=payload.date)
        try:
            album = await self.repository.add(album)
        except SQLAlchemyError as e:
            logger.error("Database error creating album: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not store the album. Please try again.",
                context={"error_type": type(e).__name__},
            )

        logger.info("Album %s created: %s - %s", album.id, album.artist, album.name)
        return AlbumResponse.model_validate(album)
