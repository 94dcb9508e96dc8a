"""
scaffold_service.modules.application

Application-level service and handler (health checking).
"""

# Package marker.
