"""Suntrack Sun Path Core.

Computes the sun's daily arc (altitude/azimuth samples) for a location and
time window, for consumption by an AR or other rendering front end.
"""

__version__ = "1.0.0"
__author__ = "Suntrack Project"

from suntrack.engine import compute_position, solar_position
from suntrack.models import GeoCoordinate, SamplingRequest, SolarPosition, SunSample
from suntrack.sampler import daily_request, sample_path

__all__ = [
    "GeoCoordinate",
    "SamplingRequest",
    "SolarPosition",
    "SunSample",
    "compute_position",
    "daily_request",
    "sample_path",
    "solar_position",
]
