"""
tests

Test package for geopath.
"""
