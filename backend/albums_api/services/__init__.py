# Services package init
"""
Albums API — Services Layer
============================

What:  Business logic between routes (HTTP) and repositories (persistence).
How:   Services receive their repository through the constructor and return
       Pydantic response schemas.

Service Inventory:
    - AlbumService: list all, get by id (with existence guard), list by artist,
      create album

Routes never talk to repositories directly, so services can be unit-tested
against an in-memory repository without HTTP or a database.
"""
