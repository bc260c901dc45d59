"""Sun path sampling over a time window.

Drives the solar engine at a fixed step and keeps daylight samples only.
"""

from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo

from suntrack.engine import OffsetProvider, compute_position
from suntrack.logger import get_logger
from suntrack.models import GeoCoordinate, SamplingRequest, SunSample

logger = get_logger(__name__)


def instant_at(start: datetime, elapsed_minutes: float) -> datetime:
    """Return the instant ``elapsed_minutes`` of real time after ``start``.

    Aware starts are stepped in UTC and converted back to the start's zone,
    so the wall clock and UTC offset are correct on both sides of a
    daylight-saving transition. Naive starts are stepped on the wall clock.
    """
    step = timedelta(minutes=elapsed_minutes)
    if start.tzinfo is None:
        return start + step
    return (start.astimezone(timezone.utc) + step).astimezone(start.tzinfo)


def sample_path(
    request: SamplingRequest,
    offset_provider: Optional[OffsetProvider] = None,
) -> tuple[SunSample, ...]:
    """Sample the sun's path for a request.

    Args:
        request: Window start, duration, step and location.
        offset_provider: Optional UTC-offset lookup, evaluated per sample.

    Returns:
        Samples with altitude > 0, ordered by instant. Empty when the sun
        never rises inside the window.
    """
    samples = []
    for i in range(request.sample_count):
        instant = instant_at(request.start, i * request.step_minutes)
        altitude, azimuth = compute_position(instant, request.location, offset_provider)
        if altitude > 0:
            samples.append(
                SunSample(instant=instant, altitude_rad=altitude, azimuth_rad=azimuth)
            )

    logger.debug(
        f"Sampled {request.sample_count} points from {request.start.isoformat()} "
        f"every {request.step_minutes} min, {len(samples)} above horizon"
    )
    return tuple(samples)


def daily_request(
    day: date,
    location: GeoCoordinate,
    tz: "str | tzinfo",
    step_minutes: float = 10.0,
    start_time: time = time(0, 0),
    duration_minutes: float = 1440.0,
) -> SamplingRequest:
    """Build the request covering a local calendar day.

    Args:
        day: Local calendar date.
        location: Observer location.
        tz: IANA timezone name or tzinfo of the observer.
        step_minutes: Sampling step.
        start_time: Local wall-clock time the window starts at.
        duration_minutes: Window length; a full day by default.
    """
    zone = ZoneInfo(tz) if isinstance(tz, str) else tz
    start = datetime.combine(day, start_time, tzinfo=zone)
    return SamplingRequest(
        start=start,
        duration_minutes=duration_minutes,
        step_minutes=step_minutes,
        location=location,
    )
