# Zenith angles in degrees from the point overhead; 90 is the geometric horizon.
OFFICIAL = 90.8333      # 90°50', refraction plus solar disk radius
CIVIL = 96.0
NAUTICAL = 102.0
ASTRONOMICAL = 108.0

PRESETS = {
  "official": OFFICIAL,
  "civil": CIVIL,
  "nautical": NAUTICAL,
  "astronomical": ASTRONOMICAL,
}


def from_altitude(degrees: float) -> float:
  """Zenith for a solar altitude in degrees (negative below the horizon)."""
  return 90.0 - degrees
