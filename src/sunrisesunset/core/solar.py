"""Solar event engine.

Implements the NOAA approximate sunrise/sunset algorithm (Almanac for
Computers, 1990) and maps its result onto wall-clock time in a target
time zone.
"""
from dataclasses import dataclass
from datetime import date, datetime, timedelta, tzinfo
from enum import Enum
from typing import Optional, Union
import logging
import math

import pytz

from ..model.location import Location

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime]
TimeZoneLike = Union[str, tzinfo]


class EventFormat(str, Enum):
    """Output representation of a solar event."""

    MINUTES = "minutes"
    STRING = "string"
    CALENDAR = "calendar"
    TIMESTAMP = "timestamp"


@dataclass(frozen=True)
class SolarEvent:
    """A computed sunrise or sunset.

    ``utc`` and ``local`` are rounded to the minute; ``utc_hours`` and
    ``local_hours`` keep the unrounded fractional time of day.
    """

    is_sunrise: bool
    zenith: float
    utc_hours: float
    local_hours: float
    utc: datetime
    local: datetime

    @property
    def minutes(self) -> float:
        """Minutes since local midnight."""
        return self.local_hours * 60.0

    @property
    def time_string(self) -> str:
        return f"{self.local.hour:02d}:{self.local.minute:02d}"

    @property
    def timestamp_ms(self) -> int:
        return int(self.utc.timestamp()) * 1000


def resolve_timezone(tz: TimeZoneLike) -> tzinfo:
    """Resolve an IANA zone name to a tzinfo; tzinfo objects pass through.

    Raises:
        pytz.UnknownTimeZoneError: If the name is not in the zone database
    """
    if isinstance(tz, str):
        return pytz.timezone(tz)
    return tz


def _sin(degrees: float) -> float:
    return math.sin(math.radians(degrees))


def _cos(degrees: float) -> float:
    return math.cos(math.radians(degrees))


def _tan(degrees: float) -> float:
    return math.tan(math.radians(degrees))


class SolarEventCalculator:
    """Sunrise/sunset engine for one location and time zone.

    Read-only after construction; a single instance may be shared between
    threads.
    """

    def __init__(self, location: Location, timezone: TimeZoneLike):
        """Initialize calculator.

        Args:
            location: Where to compute events
            timezone: IANA zone name (e.g. "America/New_York") or a tzinfo

        Raises:
            pytz.UnknownTimeZoneError: For an unknown zone name
        """
        self._location = location
        self._timezone = resolve_timezone(timezone)
        logger.debug(f"Solar calculator for {location} in {self._timezone}")

    @property
    def location(self) -> Location:
        return self._location

    @property
    def timezone(self) -> tzinfo:
        return self._timezone

    def _local_date(self, d: DateLike) -> date:
        """Calendar date of ``d``; aware datetimes are read in the target zone."""
        if isinstance(d, datetime):
            if d.tzinfo is not None:
                d = d.astimezone(self._timezone)
            return d.date()
        return d

    def _longitude_hour(self) -> float:
        return self._location.longitude / 15.0

    def _approximate_time(self, day_of_year: int, is_sunrise: bool) -> float:
        offset = 6.0 if is_sunrise else 18.0
        return day_of_year + (offset - self._longitude_hour()) / 24.0

    @staticmethod
    def _mean_anomaly(t: float) -> float:
        return 0.9856 * t - 3.289

    @staticmethod
    def _true_longitude(mean_anomaly: float) -> float:
        m = mean_anomaly
        return (m + 1.916 * _sin(m) + 0.020 * _sin(2 * m) + 282.634) % 360.0

    @staticmethod
    def _right_ascension_hours(true_longitude: float) -> float:
        ra = math.degrees(math.atan(0.91764 * _tan(true_longitude))) % 360.0
        # same quadrant as the true longitude
        ra += 90.0 * math.floor(true_longitude / 90.0) - 90.0 * math.floor(ra / 90.0)
        return ra / 15.0

    def _cos_local_hour_angle(self, true_longitude: float, zenith: float) -> float:
        sin_dec = 0.39782 * _sin(true_longitude)
        cos_dec = math.cos(math.asin(sin_dec))
        latitude = self._location.latitude
        return (_cos(zenith) - sin_dec * _sin(latitude)) / (cos_dec * _cos(latitude))

    def _local_mean_time(self, zenith: float, day: date, is_sunrise: bool) -> Optional[float]:
        """Local mean time of the event in hours [0, 24), or None when it does not occur."""
        t = self._approximate_time(day.timetuple().tm_yday, is_sunrise)
        true_longitude = self._true_longitude(self._mean_anomaly(t))

        cos_h = self._cos_local_hour_angle(true_longitude, zenith)
        if cos_h > 1.0 or cos_h < -1.0:
            # > 1: sun stays below the zenith angle all day; < -1: stays above it
            return None

        hour_angle = math.degrees(math.acos(cos_h))
        if is_sunrise:
            hour_angle = 360.0 - hour_angle

        mean_time = (
            hour_angle / 15.0
            + self._right_ascension_hours(true_longitude)
            - 0.06571 * t
            - 6.622
        )
        return mean_time % 24.0

    def compute_solar_event(
        self,
        zenith: float,
        d: DateLike,
        is_sunrise: bool,
    ) -> Optional[SolarEvent]:
        """Compute a sunrise or sunset.

        Args:
            zenith: Zenith angle in degrees (see ``core.zenith``)
            d: The date; any time-of-day component is ignored
            is_sunrise: True for sunrise, False for sunset

        Returns:
            The event, or None on polar day/night for this zenith
        """
        day = self._local_date(d)
        mean_time = self._local_mean_time(zenith, day, is_sunrise)
        if mean_time is None:
            kind = "sunrise" if is_sunrise else "sunset"
            logger.debug(
                f"No {kind} at zenith {zenith} on {day.isoformat()} for {self._location}"
            )
            return None

        # Hours after 00:00 UTC on the query date; may fall outside [0, 24).
        utc_offset_hours = mean_time - self._longitude_hour()
        midnight = datetime(day.year, day.month, day.day, tzinfo=pytz.utc)
        utc = midnight + timedelta(minutes=round(utc_offset_hours * 60.0))
        local = utc.astimezone(self._timezone)

        zone_offset = local.utcoffset().total_seconds() / 3600.0
        return SolarEvent(
            is_sunrise=is_sunrise,
            zenith=zenith,
            utc_hours=utc_offset_hours % 24.0,
            local_hours=(utc_offset_hours + zone_offset) % 24.0,
            utc=utc,
            local=local,
        )

    def compute(
        self,
        zenith: float,
        d: DateLike,
        is_sunrise: bool,
        fmt: Union[EventFormat, str] = EventFormat.CALENDAR,
    ):
        """Compute an event and render it in the requested format.

        Returns None when the event does not occur on that date.
        """
        fmt = EventFormat(fmt)
        event = self.compute_solar_event(zenith, d, is_sunrise)
        if event is None:
            return None
        if fmt is EventFormat.MINUTES:
            return event.minutes
        if fmt is EventFormat.STRING:
            return event.time_string
        if fmt is EventFormat.TIMESTAMP:
            return event.timestamp_ms
        return event.local

    def compute_solar_event_time(self, zenith: float, d: DateLike, is_sunrise: bool) -> Optional[float]:
        """Local minutes since midnight, in [0, 1440)."""
        return self.compute(zenith, d, is_sunrise, EventFormat.MINUTES)

    def compute_solar_event_string(self, zenith: float, d: DateLike, is_sunrise: bool) -> Optional[str]:
        """Local 24-hour "HH:MM"."""
        return self.compute(zenith, d, is_sunrise, EventFormat.STRING)

    def compute_solar_event_calendar(self, zenith: float, d: DateLike, is_sunrise: bool) -> Optional[datetime]:
        """Aware local datetime with seconds and microseconds zeroed."""
        return self.compute(zenith, d, is_sunrise, EventFormat.CALENDAR)

    def compute_solar_event_timestamp(self, zenith: float, d: DateLike, is_sunrise: bool) -> Optional[int]:
        """Milliseconds since the Unix epoch."""
        return self.compute(zenith, d, is_sunrise, EventFormat.TIMESTAMP)

    def __repr__(self) -> str:
        return f"SolarEventCalculator({self._location}, {self._timezone})"
