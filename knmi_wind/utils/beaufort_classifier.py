"""
Beaufort force classification.

Maps a wind speed in meters per second to a Beaufort force label using a
fixed table of half-open speed intervals.
"""

from typing import List, Optional, Tuple, Union
import logging

logger = logging.getLogger(__name__)

DEFAULT_FORCE = '0'

# (force, lower bound inclusive, upper bound exclusive), ascending by force.
# Nothing covers (3.3, 3.4) or 20.7 and above; those speeds keep the default.
BEAUFORT_INTERVALS: List[Tuple[str, float, float]] = [
    ('0', 0.0, 0.3),
    ('1', 0.3, 1.6),
    ('2', 1.6, 3.3),
    ('3', 3.4, 5.5),
    ('4', 5.5, 8.0),
    ('5', 8.0, 10.8),
    ('6', 10.8, 13.9),
    ('7', 13.9, 17.2),
    ('8', 17.2, 20.7),
]

# Published upper bounds that belong to their own force.
INCLUSIVE_UPPER_BOUNDS = {'2'}


def parse_speed(speed: Union[str, float, int, None]) -> Optional[float]:
    """Convert a speed value or cell text to float, None when not a number."""
    if speed is None:
        return None
    try:
        return float(speed)
    except (TypeError, ValueError):
        return None


def beaufort_for_ms(speed: Union[str, float, int, None]) -> str:
    """
    Classify a wind speed into a Beaufort force.

    The last interval containing the speed wins. Intervals are half open,
    except that 3.3 m/s still counts as force 2. Speeds that fall in no
    interval, or that cannot be read as a number, are force '0'.

    Args:
        speed: Wind speed in m/s, as a number or as published text (e.g. '5.5')

    Returns:
        Beaufort force label '0' to '8'
    """
    ms = parse_speed(speed)
    if ms is None:
        logger.debug(f"Cannot classify wind speed {speed!r}, using force {DEFAULT_FORCE}")
        return DEFAULT_FORCE

    force = DEFAULT_FORCE
    for key, low, high in BEAUFORT_INTERVALS:
        if low <= ms < high or (key in INCLUSIVE_UPPER_BOUNDS and ms == high):
            force = key
    return force
