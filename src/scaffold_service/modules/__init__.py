"""
scaffold_service.modules

Feature modules (service + HTTP handler pairs).
"""

# Package marker.
