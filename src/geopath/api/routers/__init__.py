"""
geopath.api.routers

Router modules mounted by `geopath.api.app.create_app`.
"""

# Package marker.
