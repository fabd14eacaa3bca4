"""
Notes API: Middleware Package
===============================

What:  Concerns applied to every request, before routing.

Middleware Chain:
    Request → [Request ID] → [Logging] → Routes / Error Chain

    Request ID runs first so that every access-log line and every error log
    carries the correlation ID.
"""
