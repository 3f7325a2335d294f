"""
geopath.db.repositories

SQL implementations of the service ports.
"""

# Package marker; repositories are imported directly from submodules.
