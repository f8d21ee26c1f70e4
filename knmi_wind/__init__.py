"""
KNMI wind observations to Particle device push.

This package fetches the KNMI observations table, extracts the wind of one
station and pushes it to a Particle device as a compass direction and a
Beaufort force.

The main public API includes:
- WeatherPushPipeline: One fetch, convert and push cycle
- StationTableParser: Locates a station row in the observations table
- ParticleNotifier: Calls a function on a Particle device
- translate_direction, beaufort_for_ms: Reading conversions
"""

__version__ = '0.1.0'
__all__ = [
    'WeatherPushPipeline',
    'StationTableParser',
    'ParticleNotifier',
    'translate_direction',
    'beaufort_for_ms',
]

from .pipeline import WeatherPushPipeline
from .parsers import StationTableParser
from .notifiers import ParticleNotifier
from .utils import translate_direction, beaufort_for_ms
