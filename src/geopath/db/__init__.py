"""
geopath.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide ORM models, engine/session setup, and repositories.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The service only sees `geopath.services.ports`; swapping the store means writing
# new repositories, not touching orchestration logic.
