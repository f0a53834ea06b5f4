"""
Twitter API — Application Package
===================================

What: A CRUD REST API for users, posts and comments with JWT authentication.

Architecture Note:
    ┌─────────────────────────────────────┐
    │      Routes (controller layer)      │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │    Auth gate (bearer dependency)    │  ← protected routers only
    ├─────────────────────────────────────┤
    │     Services (business rules)       │  ← existence & ownership checks
    ├─────────────────────────────────────┤
    │  Repositories (contract + SQLA)     │  ← return plain entity records
    ├─────────────────────────────────────┤
    │   Models & Database (SQLite)        │  ← async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Objects that live for the whole process (engine, hasher, token service)
    sit in one Container built by create_app(); everything below the routes
    is constructed per request.
"""

__version__ = "1.0.0"
