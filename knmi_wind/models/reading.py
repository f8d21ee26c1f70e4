"""Station reading data models."""

from dataclasses import dataclass
from typing import Optional, Dict, Any

from ..utils.beaufort_classifier import beaufort_for_ms, parse_speed
from ..utils.direction_translator import translate_direction

DEFAULT_DIRECTION = 'N'
DEFAULT_SPEED = '1'


@dataclass(frozen=True)
class StationReading:
    """
    Wind reading of one station as published in the observations table.

    Attributes:
        station: Station name as it appears in the table
        raw_direction: Direction in Dutch compass letters (e.g. 'ZW')
        raw_speed: Speed in m/s, cell text as published (e.g. '5.5')
    """

    station: str
    raw_direction: str
    raw_speed: str

    @property
    def speed_ms(self) -> Optional[float]:
        """Speed as a number, None if the published text is not numeric."""
        return parse_speed(self.raw_speed)

    @classmethod
    def default(cls, station: str) -> 'StationReading':
        """Reading used when the station is not in the table (N, force 1)."""
        return cls(station=station, raw_direction=DEFAULT_DIRECTION, raw_speed=DEFAULT_SPEED)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'station': self.station,
            'raw_direction': self.raw_direction,
            'raw_speed': self.raw_speed,
        }


@dataclass(frozen=True)
class NormalizedSignal:
    """Codes sent to the device: English direction letters and Beaufort force."""

    direction: str
    beaufort: str

    @classmethod
    def from_reading(cls, reading: StationReading) -> 'NormalizedSignal':
        return cls(
            direction=translate_direction(reading.raw_direction),
            beaufort=beaufort_for_ms(reading.raw_speed),
        )
