from .direction_translator import translate_direction, DUTCH_TO_ENGLISH
from .beaufort_classifier import beaufort_for_ms, parse_speed, BEAUFORT_INTERVALS, DEFAULT_FORCE

__all__ = [
    'translate_direction',
    'DUTCH_TO_ENGLISH',
    'beaufort_for_ms',
    'parse_speed',
    'BEAUFORT_INTERVALS',
    'DEFAULT_FORCE',
]
