"""
geopath.api

HTTP API package (FastAPI).

Responsibilities:
- App factory and composition root.
- Routers for path operations, health probes, and dev tokens.
"""

# Package marker; import `create_app` from `geopath.api.app`.
