# Repositories package init
"""
Albums API — Repositories (Store)
==================================

What:  Persistence collaborators that the service layer reads albums through.

Repository Inventory:
    - AlbumRepository (abstract): find_all, find_by_id, find_by_artist, exists, add
    - SqlAlchemyAlbumRepository: async SQLAlchemy implementation over one AsyncSession

The service only depends on AlbumRepository, so tests pass an in-memory
implementation (FakeAlbumRepository in tests/conftest.py) without a database.
"""
