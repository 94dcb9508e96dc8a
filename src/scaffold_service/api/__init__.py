"""
scaffold_service.api

API package.

Responsibilities:
- FastAPI app factory, routers and the HTTP error boundary.
- API-layer dependency wiring.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer stays thin: request validation + delegation to repositories/handlers.
