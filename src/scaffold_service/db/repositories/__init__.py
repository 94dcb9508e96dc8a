"""
scaffold_service.db.repositories

Repository package.

Responsibilities:
- Generate uniform CRUD repositories for registered models.
- Layer entity-specific operations on top of the generated ones.
"""

# Package marker; repositories are imported directly from submodules.


# --- Module Notes -----------------------------------------------------------
# Repositories are intentionally thin; business logic belongs in services.
