"""Presentation layer - API endpoints and HTTP concerns.

Thin FastAPI adapter: dependencies that run the authorization guards at the
request boundary, RFC 9457 error rendering, and a small v1 API.

Structure:
- routers/api/middleware/: Authorization dependencies, trace middleware
- routers/api/v1/: Versioned endpoints and error handlers
- routers/system.py: Root, health, config

The presentation layer contains NO business logic.
"""
