# Routes package init
"""
Albums API — Routes Package
============================

Route Inventory:
    - albums.py:  GET  /albums                  (list all)
                  POST /albums                  (create)
                  GET  /albums/{id}             (get by id, 422 when absent)
                  GET  /albums/{artist}         (list by artist)
                  GET  /albums/artist/{artist}  (list by artist, explicit path)
    - health.py:  GET  /health                  (service health check)

Routes are thin: extract path/body data, call AlbumService, return its schema.
"""
