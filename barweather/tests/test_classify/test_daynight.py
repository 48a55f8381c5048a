"""Tests for day/night resolution with boundary conditions."""

from datetime import datetime

from barweather.classify.daynight import is_daytime, to_local

SUNRISE = 1718417462
SUNSET = 1718477834


class TestIsDaytime:
    def test_midday(self):
        assert is_daytime(SUNRISE + 3600, SUNRISE, SUNSET) is True

    def test_at_sunrise_is_day(self):
        assert is_daytime(SUNRISE, SUNRISE, SUNSET) is True

    def test_at_sunset_is_night(self):
        # Half-open interval: the sunset instant itself is night
        assert is_daytime(SUNSET, SUNRISE, SUNSET) is False

    def test_before_sunrise(self):
        assert is_daytime(SUNRISE - 1, SUNRISE, SUNSET) is False

    def test_after_sunset(self):
        assert is_daytime(SUNSET + 100, SUNRISE, SUNSET) is False

    def test_missing_sun_times_default_to_day(self):
        assert is_daytime(1703160000, 0, 0) is True

    def test_only_sunrise_missing_is_not_default(self):
        assert is_daytime(SUNSET + 100, 0, SUNSET) is False

    def test_timestamps_past_year_9999(self):
        assert is_daytime(SUNRISE + 10, SUNRISE, 10**12) is True
        assert is_daytime(10**12, SUNRISE, SUNSET) is False


class TestToLocal:
    def test_aware(self):
        assert to_local(SUNRISE).tzinfo is not None

    def test_same_instant(self):
        assert to_local(SUNRISE).timestamp() == SUNRISE

    def test_matches_local_wall_clock(self):
        expected = datetime.fromtimestamp(SUNRISE)
        local = to_local(SUNRISE)
        assert (local.hour, local.minute) == (expected.hour, expected.minute)
