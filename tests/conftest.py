"""Shared fixtures."""

import math
from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from suntrack.models import GeoCoordinate, SunSample


@pytest.fixture
def tokyo():
    """Tokyo Station."""
    return GeoCoordinate(latitude=35.6812, longitude=139.7671)


@pytest.fixture
def longyearbyen():
    """Svalbard, well inside the Arctic circle."""
    return GeoCoordinate(latitude=78.22, longitude=15.65)


@pytest.fixture
def decorative_arc():
    """Synthetic arc a front end draws when no location is available.

    Altitude follows a sine envelope peaking at ``peak_deg`` while azimuth
    sweeps linearly from ``az_start_deg`` to ``az_end_deg``.
    """

    def build(count=13, peak_deg=60.0, az_start_deg=90.0, az_end_deg=270.0):
        start = datetime(2026, 6, 21, 6, 0, tzinfo=ZoneInfo("Asia/Tokyo"))
        samples = []
        for i in range(count):
            t = i / (count - 1)
            samples.append(
                SunSample(
                    instant=start + timedelta(hours=i),
                    altitude_rad=math.radians(peak_deg * math.sin(math.pi * t)),
                    azimuth_rad=math.radians(
                        az_start_deg + (az_end_deg - az_start_deg) * t
                    ),
                )
            )
        return samples

    return build
