"""
Albums API — Album SQLAlchemy Model
====================================

What:  ORM model representing the `albums` table.
How:   Inherits from the shared DeclarativeBase; Alembic reads this for migrations.
Who:   Returned by SqlAlchemyAlbumRepository; built by AlbumService.create_album.

Table Design:
    - id: Integer primary key, autoincremented by the database, never updated
    - name: VARCHAR(100), artist: VARCHAR(50), both NOT NULL
    - release_date: DATE column, exposed on the model as `date`
    - Index on artist for the list-by-artist lookup
"""

import datetime

from sqlalchemy import Date, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from albums_api.database import Base

NAME_MAX_LENGTH = 100
ARTIST_MAX_LENGTH = 50

# Range of the INTEGER primary key; autoincrement starts at 1
ID_MIN = 1
ID_MAX = 2**31 - 1


class Album(Base):
    """
    A music album.

    Query Patterns:
        - List all: SELECT ... ORDER BY id
        - Existence guard: SELECT EXISTS (SELECT 1 ... WHERE id = :id)
        - Get single: primary key lookup
        - By artist: SELECT ... WHERE artist = :artist ORDER BY id
          → Uses idx_albums_artist
    """

    __tablename__ = "albums"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    name: Mapped[str] = mapped_column(
        String(NAME_MAX_LENGTH),
        nullable=False,
    )

    artist: Mapped[str] = mapped_column(
        String(ARTIST_MAX_LENGTH),
        nullable=False,
    )

    # "date" is reserved in several SQL dialects; stored as release_date
    date: Mapped[datetime.date] = mapped_column(
        "release_date",
        Date,
        nullable=False,
    )

    __table_args__ = (
        Index("idx_albums_artist", "artist"),
    )

    def __repr__(self) -> str:
        return f"<Album(id={self.id}, artist='{self.artist}', name='{self.name}')>"
