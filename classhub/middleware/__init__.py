# Middleware package init
"""
ClassHub Backend - Middleware Package
======================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Access Log] → [GZip] → [CORS] → Route Handler

    1. Request ID first, so every later log line can carry it
    2. Access log measures the full handler duration and sees the final status
    3. GZip and CORS are FastAPI/Starlette stock middleware

Responses travel the chain in reverse, which is how X-Request-ID ends up on
every response, error responses included.
"""
