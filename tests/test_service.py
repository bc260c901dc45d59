"""Tests for the sun path service."""

from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from suntrack.config import Config, LocationConfig, SamplingConfig
from suntrack.models import SamplingRequest
from suntrack.service import SunPathService, SunTrackError


@pytest.fixture
def service():
    """Service for Tokyo with a 30-minute step."""
    return SunPathService(Config(sampling=SamplingConfig(step_minutes=30.0)))


class TestSunPathService:
    def test_invalid_timezone(self):
        config = Config(location=LocationConfig(timezone="Invalid/Timezone"))
        with pytest.raises(SunTrackError, match="Invalid timezone"):
            SunPathService(config)

    def test_location_from_config(self, service):
        assert service.location.latitude == 35.6812
        assert service.tzinfo == ZoneInfo("Asia/Tokyo")

    def test_request_for_day(self, service):
        request = service.request_for(date(2026, 6, 21))
        assert request.start == datetime(2026, 6, 21, 0, 0, tzinfo=ZoneInfo("Asia/Tokyo"))
        assert request.step_minutes == 30.0
        assert request.sample_count == 49

    def test_request_honours_start_time(self):
        config = Config(sampling=SamplingConfig(start_time="04:00", duration_minutes=900))
        request = SunPathService(config).request_for(date(2026, 6, 21))
        assert request.start.hour == 4
        assert request.duration_minutes == 900.0

    def test_request_defaults_to_today(self, service):
        assert service.request_for().start.date() == service.today()

    def test_path_for_day(self, service):
        samples = service.path_for(date(2026, 6, 21))
        assert samples
        assert all(s.altitude_rad > 0 for s in samples)

    def test_path_for_prebuilt_request(self, service, tokyo):
        start = datetime(2026, 6, 21, 10, 0, tzinfo=ZoneInfo("Asia/Tokyo"))
        request = SamplingRequest(start, 60.0, 20.0, tokyo)
        samples = service.path_for(date(2026, 1, 1), request=request)
        assert [s.instant for s in samples] == [
            start + timedelta(minutes=m) for m in (0, 20, 40, 60)
        ]

    def test_polar_night_path(self):
        config = Config(
            location=LocationConfig(latitude=78.22, longitude=15.65, timezone="Europe/Oslo")
        )
        assert SunPathService(config).path_for(date(2026, 12, 15)) == ()

    def test_position_at_naive_is_local(self, service):
        naive = service.position_at(datetime(2026, 6, 21, 12, 0))
        aware = service.position_at(datetime(2026, 6, 21, 12, 0, tzinfo=ZoneInfo("Asia/Tokyo")))
        assert naive == aware

    def test_position_now_is_aware(self, service):
        assert service.position_at().instant.tzinfo is not None


class TestSummarize:
    def test_empty(self):
        summary = SunPathService.summarize(())
        assert summary == {"count": 0, "first": None, "last": None, "peak": None}

    def test_peak(self, service):
        samples = service.path_for(date(2026, 6, 21))
        summary = service.summarize(samples)
        assert summary["count"] == len(samples)
        assert summary["first"] == samples[0].instant.isoformat()
        # Midsummer noon in Tokyo: 90 - 35.7 + 23.4
        assert summary["peak"]["altitude_deg"] == pytest.approx(77.8, abs=1.0)
        assert summary["peak"]["azimuth_deg"] == pytest.approx(180.0, abs=30.0)
