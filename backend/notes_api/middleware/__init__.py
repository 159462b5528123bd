# Middleware package init
"""
Notes API: Middleware Package
===============================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID: correlation ID for logs and the X-Request-ID header
    2. Logging: access log line with status and duration
    3. CORS: FastAPI's CORSMiddleware (handles preflight)

    Responses travel back through the chain in reverse order.
"""
