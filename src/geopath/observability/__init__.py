"""
geopath.observability

Observability package.

Responsibilities:
- Structured logging configuration.
- Request context propagation for consistent log enrichment.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Analytics events are a product feature, not observability; see `geopath.db.repositories.analytics`.
