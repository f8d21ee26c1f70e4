"""
Wind direction translation utilities.

KNMI publishes wind directions with Dutch compass letters (N, O, Z, W).
Devices expect the English letters, so each letter is mapped one to one.
"""

from typing import Dict

DUTCH_TO_ENGLISH: Dict[str, str] = {
    'N': 'N',
    'O': 'E',
    'Z': 'S',
    'W': 'W',
}


def translate_direction(direction: str) -> str:
    """
    Translate a Dutch compass direction to English (``ZZO`` -> ``SSE``).

    Letters outside the Dutch alphabet contribute nothing to the output.

    Args:
        direction: Direction made of Dutch compass letters

    Returns:
        Same direction in English compass letters
    """
    return ''.join(DUTCH_TO_ENGLISH.get(c, '') for c in direction)
