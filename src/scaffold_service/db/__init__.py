"""
scaffold_service.db

Persistence package (SQLAlchemy async).

Responsibilities:
- ORM models and the closed registry of model names.
- The database client and its per-model delegates.
- Generic and entity-specific repositories.
"""

# Package marker.
