"""Value types shared by the solar engine, the sampler and the front ends."""

import math
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class GeoCoordinate:
    """Observer location in decimal degrees.

    The core does not re-validate coordinates; callers check ``is_valid()``
    or use ``clamped()`` before handing a location to the engine.
    """

    latitude: float  # -90..90, positive north
    longitude: float  # -180..180, positive east

    def is_valid(self) -> bool:
        """Return True if both components are finite and in range."""
        return (
            math.isfinite(self.latitude)
            and math.isfinite(self.longitude)
            and -90.0 <= self.latitude <= 90.0
            and -180.0 <= self.longitude <= 180.0
        )

    def clamped(self) -> "GeoCoordinate":
        """Clamp latitude to [-90, 90] and wrap longitude into [-180, 180)."""
        latitude = max(-90.0, min(90.0, self.latitude))
        longitude = (self.longitude + 180.0) % 360.0 - 180.0
        return GeoCoordinate(latitude=latitude, longitude=longitude)


@dataclass(frozen=True)
class SunSample:
    """Sun position at one instant. Angles in radians."""

    instant: datetime
    altitude_rad: float  # above the horizon plane
    azimuth_rad: float  # clockwise from true north, [0, 2pi)

    @property
    def altitude_deg(self) -> float:
        """Altitude in degrees."""
        return math.degrees(self.altitude_rad)

    @property
    def azimuth_deg(self) -> float:
        """Azimuth in degrees."""
        return math.degrees(self.azimuth_rad)

    def to_dict(self, angle_unit: str = "degrees") -> dict:
        """Convert sample to dictionary for JSON export."""
        if angle_unit == "degrees":
            altitude, azimuth = self.altitude_deg, self.azimuth_deg
        elif angle_unit == "radians":
            altitude, azimuth = self.altitude_rad, self.azimuth_rad
        else:
            raise ValueError(f"angle_unit must be 'degrees' or 'radians', got '{angle_unit}'")
        return {
            "instant": self.instant.isoformat(),
            "altitude": altitude,
            "azimuth": azimuth,
        }


@dataclass(frozen=True)
class SamplingRequest:
    """A time window to sample, starting at ``start`` every ``step_minutes``."""

    start: datetime
    duration_minutes: float
    step_minutes: float
    location: GeoCoordinate

    def __post_init__(self) -> None:
        """Validate window values."""
        if not math.isfinite(self.step_minutes) or self.step_minutes <= 0:
            raise ValueError("step_minutes must be positive")
        if not math.isfinite(self.duration_minutes) or self.duration_minutes < 0:
            raise ValueError("duration_minutes must be non-negative")

    @property
    def sample_count(self) -> int:
        """Number of sample points in the window, before daylight filtering."""
        return math.floor(self.duration_minutes / self.step_minutes) + 1


@dataclass(frozen=True)
class SolarPosition:
    """All quantities from a single engine evaluation.

    Angles in radians, times in minutes.
    """

    day_of_year: int
    fractional_year: float
    equation_of_time: float
    declination: float
    true_solar_time: float
    hour_angle: float
    zenith: float
    altitude: float
    azimuth: float
