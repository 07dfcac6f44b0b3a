from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Optional, Tuple

from ..model.location import Location
from .solar import SolarEventCalculator, TimeZoneLike
from .zenith import OFFICIAL


@dataclass
class Daylight:
  location: Location
  timezone: TimeZoneLike
  zenith: float = OFFICIAL
  _calculator: SolarEventCalculator = field(init=False, repr=False)

  def __post_init__(self):
    self._calculator = SolarEventCalculator(self.location, self.timezone)

  def sunrise_sunset(self, d: date) -> Optional[Tuple[datetime, datetime]]:
    # None unless both events happen; polar days have only one or neither.
    sunrise = self._calculator.compute_solar_event_calendar(self.zenith, d, True)
    sunset = self._calculator.compute_solar_event_calendar(self.zenith, d, False)
    if sunrise is None or sunset is None:
      return None
    return sunrise, sunset

  def day_length(self, d: date) -> Optional[timedelta]:
    span = self.sunrise_sunset(d)
    if span is None:
      return None
    sunrise, sunset = span
    return sunset - sunrise
