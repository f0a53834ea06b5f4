# Middleware package init
"""
Twitter API — Middleware Package
==================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID first: every later log line can carry it
    2. Logging: records status and duration once the response is known
    3. CORS: FastAPI's CORSMiddleware (answers preflight requests)

Authentication is not middleware: protected routers declare the
`require_user` dependency (twitter_api.auth), which keeps /signup, /signin,
/health and the docs public.
"""
