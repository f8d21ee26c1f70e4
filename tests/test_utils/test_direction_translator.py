"""
Tests for Dutch to English wind direction translation.
"""

import itertools

import pytest
from knmi_wind.utils.direction_translator import translate_direction, DUTCH_TO_ENGLISH


class TestDirectionTranslator:
    """Test cases for translate_direction."""

    @pytest.mark.parametrize("dutch,english", [
        ('N', 'N'),
        ('O', 'E'),
        ('Z', 'S'),
        ('W', 'W'),
        ('ZW', 'SW'),
        ('ZZO', 'SSE'),
        ('WNW', 'WNW'),
        ('NO', 'NE'),
    ])
    def test_known_directions(self, dutch, english):
        assert translate_direction(dutch) == english

    def test_every_four_letter_direction(self):
        """Length is kept and each letter maps through the table."""
        for letters in itertools.product('NOZW', repeat=4):
            dutch = ''.join(letters)
            english = translate_direction(dutch)
            assert len(english) == len(dutch)
            assert all(DUTCH_TO_ENGLISH[d] == e for d, e in zip(dutch, english))

    def test_unknown_letters_are_dropped(self):
        assert translate_direction('ZX') == 'S'
        assert translate_direction('VAR') == ''

    def test_empty(self):
        assert translate_direction('') == ''
