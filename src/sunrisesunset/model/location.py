from dataclasses import dataclass
from typing import Union
import re


class InvalidCoordinate(ValueError):
  """Latitude or longitude outside its valid range, or not parseable."""


_LIMITS = {"latitude": (90.0, "NS"), "longitude": (180.0, "EW")}

# Hemisphere letters are upper case so they never clash with the d/m/s unit suffixes.
_DMS_PATTERN = re.compile(
  r"""
  ^\s*
  (?P<lead>[NSEW])?\s*
  (?P<deg>[+-]?\d+(?:\.\d+)?)\s*[°d:]?\s*
  (?:(?P<min>\d+(?:\.\d+)?)\s*['′m:]?\s*)?
  (?:(?P<sec>\d+(?:\.\d+)?)\s*(?:"|″|''|s)?\s*)?
  (?P<trail>[NSEW])?
  \s*$
  """,
  re.VERBOSE,
)


def _parse_dms(text: str, axis: str) -> float:
  m = _DMS_PATTERN.match(text)
  if m is None:
    raise InvalidCoordinate(f"cannot parse {axis} {text!r}")
  lead, trail = m.group("lead"), m.group("trail")
  if lead and trail:
    raise InvalidCoordinate(f"{axis} {text!r} has two hemisphere letters")
  hemisphere = lead or trail
  if hemisphere and hemisphere not in _LIMITS[axis][1]:
    raise InvalidCoordinate(f"hemisphere {hemisphere!r} is not valid for {axis}")

  deg_text = m.group("deg")
  minutes = float(m.group("min") or 0)
  seconds = float(m.group("sec") or 0)
  if minutes >= 60 or seconds >= 60:
    raise InvalidCoordinate(f"minutes and seconds must be below 60 in {text!r}")
  value = abs(float(deg_text)) + minutes/60.0 + seconds/3600.0
  if deg_text.startswith("-") or hemisphere in ("S", "W"):
    value = -value
  return value


def parse_coordinate(value: Union[float, int, str], axis: str) -> float:
  """
  Coerce decimal degrees or a degree/minute/second string to float degrees
  and check it against the axis range. Raises InvalidCoordinate.
  """
  if isinstance(value, bool):
    raise InvalidCoordinate(f"{axis} must be a number, got {value!r}")
  if isinstance(value, (int, float)):
    degrees = float(value)
  elif isinstance(value, str):
    degrees = _parse_dms(value, axis)
  else:
    raise InvalidCoordinate(f"{axis} must be a number or string, got {type(value).__name__}")

  limit = _LIMITS[axis][0]
  # written negated so NaN fails too
  if not -limit <= degrees <= limit:
    raise InvalidCoordinate(f"{axis} {degrees} outside [-{limit:g}, {limit:g}]")
  return degrees


@dataclass(frozen=True)
class Location:
  latitude: float
  longitude: float

  def __post_init__(self):
    object.__setattr__(self, "latitude", parse_coordinate(self.latitude, "latitude"))
    object.__setattr__(self, "longitude", parse_coordinate(self.longitude, "longitude"))
