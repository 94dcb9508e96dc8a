"""
scaffold_service.api.routers

HTTP routers.
"""

# Package marker.
