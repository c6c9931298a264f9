# Middleware package init
"""
Albums API — Middleware Package
================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: assigns the correlation ID used by every log line
    2. Logging: logs method, path, status and duration with that ID
"""
