"""
geopath.domain

Domain package.

Responsibilities:
- Value types (Point, results, records, analytics events).
- Great-circle distance helpers.
- The error taxonomy shared by strategies, services, and the API layer.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Nothing in this package performs I/O; it is safe to import from any layer.
