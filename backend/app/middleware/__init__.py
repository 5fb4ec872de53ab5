"""
Todo API — Middleware Package
==============================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID: Generates the correlation ID used by every log line
    2. Logging:    Logs method, path, status and duration with that ID
    3. CORS:       FastAPI's CORSMiddleware (handles browser preflight)
"""
