import pytest
from pydantic import ValidationError

from sunrisesunset import SunriseSunsetCalculator
from sunrisesunset.model.config import LocationConfig, load_locations


def test_packaged_locations_load():
  locs = load_locations()
  assert "new_york" in locs
  ny = locs["new_york"]
  assert ny.name == "new_york"
  assert ny.timezone == "America/New_York"


def test_dms_strings_in_config():
  rk = load_locations()["reykjavik"]
  assert rk.latitude == pytest.approx(64.146944, abs=1e-6)
  assert rk.longitude == pytest.approx(-21.94, abs=1e-6)


def test_build_calculator():
  calc = load_locations()["new_york"].build()
  assert isinstance(calc, SunriseSunsetCalculator)
  assert calc.location.latitude == 40.7142


def test_custom_file(tmp_path):
  p = tmp_path / "locs.yaml"
  p.write_text(
    "locations:\n"
    "  home:\n"
    "    latitude: '48 51 24 N'\n"
    "    longitude: 2.3522\n"
    "    timezone: Europe/Paris\n"
    "    name: Paris\n",
    encoding="utf-8",
  )
  locs = load_locations(p)
  assert locs["home"].name == "Paris"
  assert locs["home"].latitude == pytest.approx(48.856667, abs=1e-6)


def test_empty_file(tmp_path):
  p = tmp_path / "empty.yaml"
  p.write_text("", encoding="utf-8")
  assert load_locations(str(p)) == {}


def test_bad_latitude_rejected():
  with pytest.raises(ValidationError):
    LocationConfig(latitude=91, longitude=0, timezone="UTC")


def test_unknown_timezone_rejected():
  with pytest.raises(ValidationError):
    LocationConfig(latitude=0, longitude=0, timezone="Nowhere/Atlantis")
