from datetime import date, timedelta

from sunrisesunset.core import zenith
from sunrisesunset.core.daylight import Daylight
from sunrisesunset.model.location import Location


def test_new_york_summer_day_length():
  dl = Daylight(Location(40.7142, -74.0064), "America/New_York")
  sunrise, sunset = dl.sunrise_sunset(date(2023, 6, 21))
  assert sunrise < sunset
  assert timedelta(hours=14, minutes=50) < dl.day_length(date(2023, 6, 21)) < timedelta(hours=15, minutes=20)


def test_civil_day_longer_than_official():
  loc = Location(51.5074, -0.1278)
  d = date(2023, 3, 1)
  official = Daylight(loc, "Europe/London").day_length(d)
  civil = Daylight(loc, "Europe/London", zenith=zenith.CIVIL).day_length(d)
  assert civil > official


def test_polar_day_has_no_span():
  dl = Daylight(Location(78.0, 15.6), "Arctic/Longyearbyen")
  assert dl.sunrise_sunset(date(2023, 6, 21)) is None
  assert dl.day_length(date(2023, 6, 21)) is None
