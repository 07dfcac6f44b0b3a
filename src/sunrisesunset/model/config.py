from pathlib import Path
from typing import Dict, Optional, Union
import logging

import pytz
import yaml
from pydantic import BaseModel, field_validator

from ..calculator import SunriseSunsetCalculator
from .location import Location, parse_coordinate

logger = logging.getLogger(__name__)

DEFAULT_LOCATIONS_PATH = Path(__file__).parent.parent / "config" / "locations.yaml"


class LocationConfig(BaseModel):
  latitude: Union[float, str]
  longitude: Union[float, str]
  timezone: str
  name: Optional[str] = None

  @field_validator("latitude")
  @classmethod
  def _check_latitude(cls, v):
    return parse_coordinate(v, "latitude")

  @field_validator("longitude")
  @classmethod
  def _check_longitude(cls, v):
    return parse_coordinate(v, "longitude")

  @field_validator("timezone")
  @classmethod
  def _check_timezone(cls, v):
    try:
      pytz.timezone(v)
    except pytz.UnknownTimeZoneError:
      raise ValueError(f"unknown time zone {v!r}")
    return v

  def location(self) -> Location:
    return Location(self.latitude, self.longitude)

  def build(self) -> SunriseSunsetCalculator:
    return SunriseSunsetCalculator(self.location(), self.timezone)


def load_locations(path: Optional[Union[str, Path]] = None) -> Dict[str, LocationConfig]:
  """
  Read a YAML file with a top-level ``locations:`` mapping of name -> fields.
  Defaults to the packaged config/locations.yaml.
  """
  p = Path(path) if path else DEFAULT_LOCATIONS_PATH
  raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
  locations = {k: LocationConfig(**{"name": k, **v}) for k, v in (raw.get("locations") or {}).items()}
  logger.debug(f"Loaded {len(locations)} locations from {p}")
  return locations
