#!/usr/bin/env python3
"""
Geographic utilities for the aviation weather server.
Handles route midpoints, distances, and en-route search radii.
"""

import math

from config import Config

NM_PER_DEGREE = 60.0


def midpoint(lat1, lon1, lat2, lon2):
    """Arithmetic midpoint of two coordinate pairs, in degrees."""
    return (lat1 + lat2) / 2, (lon1 + lon2) / 2


def route_distance_nm(lat1, lon1, lat2, lon2):
    """
    Approximate distance between two points in nautical miles.

    Equirectangular approximation: longitude degrees are scaled by the
    cosine of the mid latitude. Good enough to size a search radius, not
    for navigation.
    """
    mid_lat, _ = midpoint(lat1, lon1, lat2, lon2)
    dlat_nm = (lat2 - lat1) * NM_PER_DEGREE
    dlon_nm = (lon2 - lon1) * math.cos(math.radians(mid_lat)) * NM_PER_DEGREE
    return math.sqrt(dlat_nm**2 + dlon_nm**2)


def enroute_search_radius(distance_nm, minimum=Config.MIN_ENROUTE_RADIUS):
    """PIREP search radius around the route midpoint, in whole miles."""
    return max(minimum, round(distance_nm / 3))
