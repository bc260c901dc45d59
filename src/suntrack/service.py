"""Service module for Suntrack.

This module ties configuration to the solar core and provides the
path and position workflows used by the command line.
"""

from datetime import date, datetime
from typing import Optional, Sequence
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from suntrack.config import Config
from suntrack.engine import compute_position
from suntrack.logger import get_logger
from suntrack.models import GeoCoordinate, SamplingRequest, SunSample
from suntrack.sampler import daily_request, sample_path

logger = get_logger(__name__)


class SunTrackError(Exception):
    """Exception raised for service-level errors."""

    pass


class SunPathService:
    """Computes sun paths and positions for the configured observer."""

    def __init__(self, config: Config):
        """Initialize the service.

        Args:
            config: Application configuration.

        Raises:
            SunTrackError: If the configured timezone is unknown.
        """
        self.config = config
        self.location = GeoCoordinate(
            latitude=config.location.latitude,
            longitude=config.location.longitude,
        )
        try:
            self.tzinfo = ZoneInfo(config.location.timezone)
        except (ZoneInfoNotFoundError, ValueError):
            raise SunTrackError(f"Invalid timezone: {config.location.timezone}")

    def today(self) -> date:
        """Current local date at the observer."""
        return datetime.now(self.tzinfo).date()

    def request_for(self, day: Optional[date] = None) -> SamplingRequest:
        """Build the sampling request for a local day (default: today)."""
        sampling = self.config.sampling
        return daily_request(
            day or self.today(),
            self.location,
            self.tzinfo,
            step_minutes=sampling.step_minutes,
            start_time=sampling.start,
            duration_minutes=sampling.duration_minutes,
        )

    def path_for(
        self,
        day: Optional[date] = None,
        request: Optional[SamplingRequest] = None,
    ) -> tuple[SunSample, ...]:
        """Sample the sun's path for a local day (default: today).

        A prebuilt ``request`` is sampled as given and ``day`` is ignored.
        """
        if request is None:
            request = self.request_for(day)
        samples = sample_path(request)
        if samples:
            logger.info(
                f"Sun path for {request.start.date()}: {len(samples)} samples "
                f"from {samples[0].instant.strftime('%H:%M')} "
                f"to {samples[-1].instant.strftime('%H:%M')}"
            )
        else:
            logger.info(f"Sun stays below the horizon on {request.start.date()}")
        return samples

    def position_at(self, instant: Optional[datetime] = None) -> SunSample:
        """Sun position at an instant (default: now).

        Naive instants are read as local time at the observer.
        """
        if instant is None:
            instant = datetime.now(self.tzinfo)
        elif instant.tzinfo is None:
            instant = instant.replace(tzinfo=self.tzinfo)
        altitude, azimuth = compute_position(instant, self.location)
        return SunSample(instant=instant, altitude_rad=altitude, azimuth_rad=azimuth)

    @staticmethod
    def summarize(samples: Sequence[SunSample]) -> dict:
        """Summarize a path.

        Returns:
            Dictionary with sample count, first/last instants and the
            peak altitude sample.
        """
        if not samples:
            return {"count": 0, "first": None, "last": None, "peak": None}

        peak = max(samples, key=lambda s: s.altitude_rad)
        return {
            "count": len(samples),
            "first": samples[0].instant.isoformat(),
            "last": samples[-1].instant.isoformat(),
            "peak": {
                "instant": peak.instant.isoformat(),
                "altitude_deg": round(peak.altitude_deg, 2),
                "azimuth_deg": round(peak.azimuth_deg, 2),
            },
        }
