"""
Albums API — Application Package Initializer
=============================================

What: Marks the `albums_api` directory as a Python package.
Who:  Imported by uvicorn (`albums_api.main:app`), Alembic, and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Query Handler)    │  ← Existence guard, validation
    ├─────────────────────────────────────┤
    │     Repositories (Store port)       │  ← find_all / find_by_id / exists
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Wiring between the layers happens in one place: albums_api.dependencies.
"""

__version__ = "1.0.0"
