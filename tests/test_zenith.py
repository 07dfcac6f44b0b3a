from sunrisesunset.core import zenith


def test_presets():
  assert zenith.OFFICIAL == 90.8333
  assert zenith.PRESETS["astronomical"] == 108.0
  assert zenith.OFFICIAL < zenith.CIVIL < zenith.NAUTICAL < zenith.ASTRONOMICAL


def test_from_altitude():
  assert zenith.from_altitude(-6) == zenith.CIVIL
  assert zenith.from_altitude(-18) == zenith.ASTRONOMICAL
  assert zenith.from_altitude(0) == 90.0
