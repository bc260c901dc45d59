"""Solar position engine.

NOAA low-precision solar position (fractional-year Fourier series for the
equation of time and declination). Accurate to roughly 0.01 degree away from
the poles and for dates within a few decades of the present.

All angles in radians unless otherwise noted.
"""

import math
from datetime import datetime, tzinfo
from typing import Callable, Optional
from zoneinfo import ZoneInfo

from suntrack.models import GeoCoordinate, SolarPosition

MINUTES_PER_DAY = 1440.0
MINUTES_PER_DEGREE = 4.0
DEGENERATE_EPSILON = 1e-9
MIN_ALTITUDE = math.nextafter(-math.pi / 2.0, 0.0)

OffsetProvider = Callable[[datetime], float]


def utc_offset_minutes(instant: datetime) -> float:
    """Return the instant's own UTC offset in minutes east of UTC.

    Raises:
        ValueError: If the instant is naive.
    """
    offset = instant.utcoffset()
    if offset is None:
        raise ValueError(
            "instant must be timezone-aware when no offset provider is given"
        )
    return offset.total_seconds() / 60.0


def fixed_offset(minutes: float) -> OffsetProvider:
    """Build a provider that always returns ``minutes``."""

    def provider(instant: datetime) -> float:
        return minutes

    return provider


def zone_offset(zone: "str | tzinfo") -> OffsetProvider:
    """Build a provider that reads the instant's wall clock as local time in ``zone``.

    The offset is looked up per instant, so it follows daylight-saving
    transitions.
    """
    tz = ZoneInfo(zone) if isinstance(zone, str) else zone

    def provider(instant: datetime) -> float:
        offset = instant.replace(tzinfo=tz).utcoffset()
        return offset.total_seconds() / 60.0

    return provider


def fractional_year(day_of_year: int, hour: float) -> float:
    """Fractional year angle gamma for a 1-based day and local hour."""
    return 2.0 * math.pi / 365.0 * (day_of_year - 1 + (hour - 12.0) / 24.0)


def equation_of_time(gamma: float) -> float:
    """Equation of time in minutes."""
    return 229.18 * (
        0.000075
        + 0.001868 * math.cos(gamma)
        - 0.032077 * math.sin(gamma)
        - 0.014615 * math.cos(2 * gamma)
        - 0.040849 * math.sin(2 * gamma)
    )


def solar_declination(gamma: float) -> float:
    """Solar declination in radians."""
    return (
        0.006918
        - 0.399912 * math.cos(gamma)
        + 0.070257 * math.sin(gamma)
        - 0.006758 * math.cos(2 * gamma)
        + 0.000907 * math.sin(2 * gamma)
        - 0.002697 * math.cos(3 * gamma)
        + 0.00148 * math.sin(3 * gamma)
    )


def true_solar_time(
    local_minutes: float, eot: float, longitude: float, offset_minutes: float
) -> float:
    """True solar time in minutes, wrapped into [0, 1440).

    Args:
        local_minutes: Wall-clock minutes since local midnight.
        eot: Equation of time in minutes.
        longitude: Observer longitude in degrees, positive east.
        offset_minutes: UTC offset of the wall clock in minutes.
    """
    tst = local_minutes + eot + MINUTES_PER_DEGREE * longitude - offset_minutes
    if tst < 0:
        tst += MINUTES_PER_DAY
    return tst % MINUTES_PER_DAY


def hour_angle(tst: float) -> float:
    """Hour angle in radians. Zero at solar noon, negative in the morning."""
    return math.radians(tst / MINUTES_PER_DEGREE - 180.0)


def solar_zenith(latitude: float, declination: float, ha: float) -> float:
    """Zenith angle in radians. Latitude in radians."""
    cos_zenith = math.sin(latitude) * math.sin(declination) + math.cos(
        latitude
    ) * math.cos(declination) * math.cos(ha)
    # Clamp to [-1, 1] to handle floating point errors
    return math.acos(max(-1.0, min(1.0, cos_zenith)))


def solar_azimuth(
    latitude: float, declination: float, ha: float, altitude: float
) -> float:
    """Azimuth in radians, clockwise from north, in [0, 2pi).

    Returns 0.0 (north) when the sun is at the zenith or the observer is at a
    pole, where the bearing is undefined.
    """
    cos_alt = math.cos(altitude)
    cos_lat = math.cos(latitude)
    if abs(cos_alt) < DEGENERATE_EPSILON or abs(cos_lat) < DEGENERATE_EPSILON:
        return 0.0
    azimuth = math.atan2(
        -math.sin(ha) * math.cos(declination) / cos_alt,
        (math.sin(declination) - math.sin(altitude) * math.sin(latitude))
        / (cos_alt * cos_lat),
    )
    if azimuth < 0:
        azimuth += 2.0 * math.pi
    # -tiny + 2pi rounds to exactly 2pi
    if azimuth >= 2.0 * math.pi:
        azimuth = 0.0
    return azimuth


def solar_position(
    instant: datetime,
    location: GeoCoordinate,
    offset_provider: Optional[OffsetProvider] = None,
) -> SolarPosition:
    """Calculate the full solar position for an instant and location.

    The calendar day and time of day are read from the instant's wall clock;
    the UTC offset comes from ``offset_provider`` (default: the instant's own
    ``utcoffset()``).

    Args:
        instant: Point in time. Must be timezone-aware unless an offset
            provider is given.
        location: Observer location. Not validated here.
        offset_provider: Callable returning the UTC offset in minutes for
            an instant.

    Returns:
        SolarPosition with every intermediate quantity.
    """
    provider = offset_provider or utc_offset_minutes
    offset = provider(instant)

    n = instant.timetuple().tm_yday
    local_minutes = (
        instant.hour * 60.0
        + instant.minute
        + instant.second / 60.0
        + instant.microsecond / 60_000_000.0
    )
    gamma = fractional_year(n, local_minutes / 60.0)
    eot = equation_of_time(gamma)
    decl = solar_declination(gamma)
    tst = true_solar_time(local_minutes, eot, location.longitude, offset)
    ha = hour_angle(tst)

    lat = math.radians(location.latitude)
    zenith = solar_zenith(lat, decl, ha)
    # Lower bound is open: solar nadir stays one ulp above -pi/2
    altitude = max(math.pi / 2.0 - zenith, MIN_ALTITUDE)
    azimuth = solar_azimuth(lat, decl, ha, altitude)

    return SolarPosition(
        day_of_year=n,
        fractional_year=gamma,
        equation_of_time=eot,
        declination=decl,
        true_solar_time=tst,
        hour_angle=ha,
        zenith=zenith,
        altitude=altitude,
        azimuth=azimuth,
    )


def compute_position(
    instant: datetime,
    location: GeoCoordinate,
    offset_provider: Optional[OffsetProvider] = None,
) -> tuple[float, float]:
    """Return (altitude, azimuth) in radians for an instant and location."""
    pos = solar_position(instant, location, offset_provider)
    return pos.altitude, pos.azimuth
