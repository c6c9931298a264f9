"""
Albums API — Album Route Handlers
==================================

What:  GET /albums, POST /albums, GET /albums/{id}, GET /albums/{artist}.
How:   Each handler delegates to AlbumService and returns its schema. Handlers
       contain no error formatting; a missing album surfaces as
       UnprocessableEntityError and is turned into a 422 by the global handler
       registered in main.py.

Path resolution for /albums/{segment}:
    /albums/{album_id:signed_int} is declared first and matches -?[0-9]+, so
    /albums/1 and /albums/-1 are id lookups (the second a guaranteed 422)
    and /albums/Radiohead falls through to the artist route. Artists whose
    name is all digits are reachable through the unambiguous
    /albums/artist/{artist}.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from starlette.convertors import Convertor, register_url_convertor

from albums_api.dependencies import get_album_service
from albums_api.schemas.album import AlbumCreate, AlbumResponse, ErrorResponse
from albums_api.schemas.messages import ExceptionMessage
from albums_api.services.album_service import AlbumService

logger = logging.getLogger(__name__)


class SignedIntConvertor(Convertor):
    """Path convertor for integers with an optional leading minus sign."""
    regex = "-?[0-9]+"

    def convert(self, value: str) -> int:
        return int(value)

    def to_string(self, value: int) -> str:
        return str(int(value))


# Must be registered before the routes below compile their paths
register_url_convertor("signed_int", SignedIntConvertor())

router = APIRouter(prefix="/albums", tags=["Albums"])


@router.get(
    "",
    response_model=List[AlbumResponse],
    responses={
        200: {"description": "Every stored album, ordered by id"},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List all albums",
)
async def list_albums(
    service: AlbumService = Depends(get_album_service),
) -> List[AlbumResponse]:
    return await service.list_all()


@router.post(
    "",
    status_code=201,
    response_model=AlbumResponse,
    responses={
        201: {"description": "Album stored", "model": AlbumResponse},
        400: {"description": "Invalid album", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create an album",
    description=(
        "Stores a new album. Name must be 1-100 characters, artist 1-50 characters, "
        "neither blank, and the release date must be before today."
    ),
)
async def create_album(
    payload: AlbumCreate,
    service: AlbumService = Depends(get_album_service),
) -> AlbumResponse:
    return await service.create_album(payload)


@router.get(
    "/{album_id:signed_int}",
    response_model=AlbumResponse,
    responses={
        200: {"description": "The album", "model": AlbumResponse},
        422: {"description": "No album with this id", "model": ExceptionMessage},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a single album by id",
)
async def get_album(
    album_id: int,
    service: AlbumService = Depends(get_album_service),
) -> AlbumResponse:
    return await service.get_by_id(album_id)


@router.get(
    "/artist/{artist}",
    response_model=List[AlbumResponse],
    responses={
        200: {"description": "Albums by this artist (possibly empty)"},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List albums by artist (explicit path)",
    description="Same as /albums/{artist}, also for artist names made only of digits.",
)
async def list_albums_by_artist_explicit(
    artist: str,
    service: AlbumService = Depends(get_album_service),
) -> List[AlbumResponse]:
    return await service.list_by_artist(artist)


@router.get(
    "/{artist}",
    response_model=List[AlbumResponse],
    responses={
        200: {"description": "Albums by this artist (possibly empty)"},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List albums by artist",
    description="Exact, case-sensitive match on the artist name.",
)
async def list_albums_by_artist(
    artist: str,
    service: AlbumService = Depends(get_album_service),
) -> List[AlbumResponse]:
    return await service.list_by_artist(artist)
