"""
Campus API Backend: Middleware Package
========================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: adopts or generates the correlation ID
    2. Logging:    one access line per request, tagged with that ID
"""
