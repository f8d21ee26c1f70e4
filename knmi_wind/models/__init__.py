from .reading import StationReading, NormalizedSignal, DEFAULT_DIRECTION, DEFAULT_SPEED
from .push import PushOutcome, PushSummary

__all__ = [
    'StationReading',
    'NormalizedSignal',
    'PushOutcome',
    'PushSummary',
    'DEFAULT_DIRECTION',
    'DEFAULT_SPEED',
]
