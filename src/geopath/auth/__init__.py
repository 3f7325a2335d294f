"""
geopath.auth

Caller identity for the HTTP layer.

Responsibilities:
- JWT helpers and validation.
- FastAPI dependency that resolves the calling owner.
"""

# Package marker.
