from datetime import date

import pytest

from sunrisesunset import SunriseSunsetCalculator, get_sunrise, get_sunset
from sunrisesunset.core import zenith
from sunrisesunset.core.solar import SolarEventCalculator
from sunrisesunset.model.location import InvalidCoordinate, Location

D = date(2023, 6, 21)
NYC = Location(40.7142, -74.0064)
TZ = "America/New_York"


def test_named_accessors_delegate():
  calc = SunriseSunsetCalculator(NYC, TZ)
  engine = SolarEventCalculator(NYC, TZ)
  for name, angle in zenith.PRESETS.items():
    for event, is_sunrise in (("sunrise", True), ("sunset", False)):
      assert getattr(calc, f"{name}_{event}_for_date")(D) == \
        engine.compute_solar_event_timestamp(angle, D, is_sunrise)
      assert getattr(calc, f"{name}_{event}_string_for_date")(D) == \
        engine.compute_solar_event_string(angle, D, is_sunrise)
      assert getattr(calc, f"{name}_{event}_calendar_for_date")(D) == \
        engine.compute_solar_event_calendar(angle, D, is_sunrise)


def test_generic_sunrise_sunset():
  calc = SunriseSunsetCalculator(NYC, TZ)
  assert calc.sunrise(D, fmt="string") == calc.official_sunrise_string_for_date(D)
  assert calc.sunset(D, zenith.CIVIL) == calc.civil_sunset_calendar_for_date(D)


def test_location_accessor():
  calc = SunriseSunsetCalculator(NYC, TZ)
  assert calc.location is NYC
  assert calc.timezone.zone == TZ


def test_get_sunrise_matches_engine():
  engine = SolarEventCalculator(NYC, TZ)
  for degrees in (-0.8333, -6, -12, -18, 5):
    assert get_sunrise(40.7142, -74.0064, TZ, D, degrees) == \
      engine.compute_solar_event_calendar(90 - degrees, D, True)
    assert get_sunset(40.7142, -74.0064, TZ, D, degrees) == \
      engine.compute_solar_event_calendar(90 - degrees, D, False)


def test_get_sunrise_civil():
  calc = SunriseSunsetCalculator(NYC, TZ)
  assert get_sunrise(40.7142, -74.0064, TZ, D, -6) == calc.civil_sunrise_calendar_for_date(D)


def test_get_sunrise_validates_coordinates():
  with pytest.raises(InvalidCoordinate):
    get_sunrise(95, 0, TZ, D, -6)
