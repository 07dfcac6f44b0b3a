"""Sunrise and sunset times for a location, date and zenith angle."""

from .calculator import SunriseSunsetCalculator, get_sunrise, get_sunset
from .core import zenith
from .core.daylight import Daylight
from .core.solar import EventFormat, SolarEvent, SolarEventCalculator
from .model.config import LocationConfig, load_locations
from .model.location import InvalidCoordinate, Location

__all__ = [
    "SunriseSunsetCalculator",
    "get_sunrise",
    "get_sunset",
    "zenith",
    "Daylight",
    "EventFormat",
    "SolarEvent",
    "SolarEventCalculator",
    "LocationConfig",
    "load_locations",
    "InvalidCoordinate",
    "Location",
]
