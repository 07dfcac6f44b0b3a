"""Public sunrise/sunset calculator with named accessors per zenith preset."""

from datetime import datetime
from typing import Optional, Union

from .core import zenith
from .core.solar import DateLike, EventFormat, SolarEventCalculator, TimeZoneLike
from .model.location import Location


def _accessor(angle: float, is_sunrise: bool, fmt: EventFormat, label: str):
    """Build a named accessor delegating to the generic computation."""

    def method(self, d: DateLike):
        return self.calculator.compute(angle, d, is_sunrise, fmt)

    event = "sunrise" if is_sunrise else "sunset"
    method.__doc__ = f"{label} ({angle:g} deg) {event} for the given date as {fmt.value}, or None."
    return method


class SunriseSunsetCalculator:
    """Sunrise and sunset for one location in one time zone."""

    def __init__(self, location: Location, timezone: TimeZoneLike):
        """Initialize calculator.

        Args:
            location: Latitude/longitude to compute events for
            timezone: IANA zone name (e.g. "America/New_York") or a tzinfo
        """
        self.calculator = SolarEventCalculator(location, timezone)

    @property
    def location(self) -> Location:
        return self.calculator.location

    @property
    def timezone(self):
        return self.calculator.timezone

    def sunrise(
        self,
        d: DateLike,
        angle: float = zenith.OFFICIAL,
        fmt: Union[EventFormat, str] = EventFormat.CALENDAR,
    ):
        """Sunrise at an arbitrary zenith angle."""
        return self.calculator.compute(angle, d, True, fmt)

    def sunset(
        self,
        d: DateLike,
        angle: float = zenith.OFFICIAL,
        fmt: Union[EventFormat, str] = EventFormat.CALENDAR,
    ):
        """Sunset at an arbitrary zenith angle."""
        return self.calculator.compute(angle, d, False, fmt)

    astronomical_sunrise_for_date = _accessor(zenith.ASTRONOMICAL, True, EventFormat.TIMESTAMP, "Astronomical")
    astronomical_sunrise_string_for_date = _accessor(zenith.ASTRONOMICAL, True, EventFormat.STRING, "Astronomical")
    astronomical_sunrise_calendar_for_date = _accessor(zenith.ASTRONOMICAL, True, EventFormat.CALENDAR, "Astronomical")
    astronomical_sunset_for_date = _accessor(zenith.ASTRONOMICAL, False, EventFormat.TIMESTAMP, "Astronomical")
    astronomical_sunset_string_for_date = _accessor(zenith.ASTRONOMICAL, False, EventFormat.STRING, "Astronomical")
    astronomical_sunset_calendar_for_date = _accessor(zenith.ASTRONOMICAL, False, EventFormat.CALENDAR, "Astronomical")

    nautical_sunrise_for_date = _accessor(zenith.NAUTICAL, True, EventFormat.TIMESTAMP, "Nautical")
    nautical_sunrise_string_for_date = _accessor(zenith.NAUTICAL, True, EventFormat.STRING, "Nautical")
    nautical_sunrise_calendar_for_date = _accessor(zenith.NAUTICAL, True, EventFormat.CALENDAR, "Nautical")
    nautical_sunset_for_date = _accessor(zenith.NAUTICAL, False, EventFormat.TIMESTAMP, "Nautical")
    nautical_sunset_string_for_date = _accessor(zenith.NAUTICAL, False, EventFormat.STRING, "Nautical")
    nautical_sunset_calendar_for_date = _accessor(zenith.NAUTICAL, False, EventFormat.CALENDAR, "Nautical")

    civil_sunrise_for_date = _accessor(zenith.CIVIL, True, EventFormat.TIMESTAMP, "Civil")
    civil_sunrise_string_for_date = _accessor(zenith.CIVIL, True, EventFormat.STRING, "Civil")
    civil_sunrise_calendar_for_date = _accessor(zenith.CIVIL, True, EventFormat.CALENDAR, "Civil")
    civil_sunset_for_date = _accessor(zenith.CIVIL, False, EventFormat.TIMESTAMP, "Civil")
    civil_sunset_string_for_date = _accessor(zenith.CIVIL, False, EventFormat.STRING, "Civil")
    civil_sunset_calendar_for_date = _accessor(zenith.CIVIL, False, EventFormat.CALENDAR, "Civil")

    official_sunrise_for_date = _accessor(zenith.OFFICIAL, True, EventFormat.TIMESTAMP, "Official")
    official_sunrise_string_for_date = _accessor(zenith.OFFICIAL, True, EventFormat.STRING, "Official")
    official_sunrise_calendar_for_date = _accessor(zenith.OFFICIAL, True, EventFormat.CALENDAR, "Official")
    official_sunset_for_date = _accessor(zenith.OFFICIAL, False, EventFormat.TIMESTAMP, "Official")
    official_sunset_string_for_date = _accessor(zenith.OFFICIAL, False, EventFormat.STRING, "Official")
    official_sunset_calendar_for_date = _accessor(zenith.OFFICIAL, False, EventFormat.CALENDAR, "Official")

    def __repr__(self) -> str:
        return f"SunriseSunsetCalculator({self.location}, {self.timezone})"


def get_sunrise(
    latitude: float,
    longitude: float,
    timezone: TimeZoneLike,
    d: DateLike,
    degrees: float,
) -> Optional[datetime]:
    """One-off sunrise for a solar altitude in degrees.

    Args:
        latitude: Decimal degrees
        longitude: Decimal degrees
        timezone: IANA zone name or tzinfo
        d: The date
        degrees: Solar altitude at the event, negative below the horizon
            (-6 is civil sunrise)

    Returns:
        Local sunrise datetime, or None if the sun never reaches that altitude
    """
    calculator = SolarEventCalculator(Location(latitude, longitude), timezone)
    return calculator.compute_solar_event_calendar(zenith.from_altitude(degrees), d, True)


def get_sunset(
    latitude: float,
    longitude: float,
    timezone: TimeZoneLike,
    d: DateLike,
    degrees: float,
) -> Optional[datetime]:
    """One-off sunset for a solar altitude in degrees; see ``get_sunrise``."""
    calculator = SolarEventCalculator(Location(latitude, longitude), timezone)
    return calculator.compute_solar_event_calendar(zenith.from_altitude(degrees), d, False)
