"""
gpxroute - convert a GPX track into route documents.

Produces a GeoJSON geometry, a distance-indexed elevation profile
and a stats record from the first track of a GPX file.
"""

__version__ = "0.1.0"
