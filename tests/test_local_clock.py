from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from daily_movie.applications.services import local_clock
from daily_movie.applications.services.local_clock import LocalClock

NEW_YORK = ZoneInfo("America/New_York")


class TestLocalClock:
    @pytest.fixture
    def system_zone_clock(self, monkeypatch):
        """Clock built without an explicit zone on a host set to New York time"""
        monkeypatch.setattr(local_clock, "get_localzone", lambda: NEW_YORK)
        return LocalClock()

    def test_default_zone_follows_daylight_saving(self, system_zone_clock):
        winter = datetime(2024, 1, 15, 12, tzinfo=system_zone_clock.tz)
        summer = datetime(2024, 7, 15, 12, tzinfo=system_zone_clock.tz)

        assert winter.utcoffset() == timedelta(hours=-5)
        assert summer.utcoffset() == timedelta(hours=-4)

    def test_daily_time_carries_the_zone(self, system_zone_clock):
        at = system_zone_clock.at(0, 0)

        assert at.tzinfo is NEW_YORK
        assert (at.hour, at.minute) == (0, 0)

    @pytest.mark.parametrize(
        "after, expected_offset",
        [
            (datetime(2024, 3, 9, 12, tzinfo=NEW_YORK), timedelta(hours=-5)),
            (datetime(2024, 3, 10, 12, tzinfo=NEW_YORK), timedelta(hours=-4)),
            (datetime(2024, 11, 2, 12, tzinfo=NEW_YORK), timedelta(hours=-4)),
            (datetime(2024, 11, 3, 12, tzinfo=NEW_YORK), timedelta(hours=-5)),
        ],
    )
    def test_next_midnight_across_dst_change(self, system_zone_clock, after, expected_offset):
        midnight = system_zone_clock.next_midnight(after)

        assert midnight.date() == after.date() + timedelta(days=1)
        assert (midnight.hour, midnight.minute) == (0, 0)
        assert midnight.utcoffset() == expected_offset

    def test_from_name(self):
        assert LocalClock.from_name("Asia/Tokyo").tz == ZoneInfo("Asia/Tokyo")

    def test_from_empty_name_uses_system_zone(self, monkeypatch):
        monkeypatch.setattr(local_clock, "get_localzone", lambda: NEW_YORK)

        assert LocalClock.from_name(None).tz is NEW_YORK
