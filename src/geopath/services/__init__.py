"""
geopath.services

Service-layer package.

Responsibilities:
- Validate, dispatch, and persist path searches.
- Enforce record ownership and visibility.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services depend on the `ports` protocols only, so they are testable with in-memory fakes.
