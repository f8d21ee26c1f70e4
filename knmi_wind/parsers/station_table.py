from typing import List, Optional, Union
import re
import logging

from bs4 import BeautifulSoup

from ..models.reading import StationReading

logger = logging.getLogger(__name__)


class StationTableParser:
    """Parser for the KNMI observations table (one row per weather station)."""

    ROW_SELECTOR = '#weather table tbody tr'

    # Column layout of the observations table
    STATION_INDEX = 0
    DIRECTION_INDEX = 5
    SPEED_INDEX = 6

    @staticmethod
    def load(html_data: Union[bytes, str]) -> BeautifulSoup:
        """Parse raw HTML into a document usable by the other methods."""
        if isinstance(html_data, bytes):
            html_data = html_data.decode('utf-8', errors='ignore')
        return BeautifulSoup(html_data, 'html.parser')

    def parse_rows(self, document: BeautifulSoup) -> List[StationReading]:
        """
        Extract every station row of the table, in document order.

        Rows too short to hold a speed cell are skipped.

        Args:
            document: Parsed observations page

        Returns:
            List of StationReading, one per usable row
        """
        rows = document.select(self.ROW_SELECTOR)
        logger.debug(f"[KNMI] Found {len(rows)} rows in observations table")

        out: List[StationReading] = []
        for row in rows:
            cells = row.find_all('td')
            if len(cells) <= self.SPEED_INDEX:
                continue
            out.append(StationReading(
                station=self._extract_text(cells[self.STATION_INDEX]),
                raw_direction=self._extract_text(cells[self.DIRECTION_INDEX]),
                raw_speed=self._extract_text(cells[self.SPEED_INDEX]),
            ))
        return out

    def find_station(self, document: BeautifulSoup, station: str) -> Optional[StationReading]:
        """
        Find the reading of a station, matching its name case-insensitively.

        All rows are scanned; if a name appears more than once the last row wins.

        Args:
            document: Parsed observations page
            station: Station name (e.g. 'De Bilt')

        Returns:
            The matching StationReading, or None if the station is not listed
        """
        wanted = station.upper()
        found = None
        for reading in self.parse_rows(document):
            if reading.station.upper() == wanted:
                found = reading

        if found is None:
            logger.debug(f"[KNMI] Station {station} not found in observations table")
        return found

    def _extract_text(self, element) -> str:
        if element is None:
            return ""
        text = element.get_text(separator=' ', strip=True)
        text = re.sub(r'\s+', ' ', text)
        return text.strip()
