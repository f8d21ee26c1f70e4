"""KNMI observations web source."""

import logging
from typing import Optional

import requests
from bs4 import BeautifulSoup

from ..parsers.station_table import StationTableParser

logger = logging.getLogger(__name__)

OBSERVATIONS_URL = "http://www.knmi.nl/nederland-nu/weer/waarnemingen"


class KnmiWebSource:
    """
    Fetch the current observations page published by KNMI.

    Each call makes exactly one GET request. Errors are not handled here:
    a failed request or a non-2xx status raises the requests exception.

    Example:
        source = KnmiWebSource()
        document = source.fetch_document()
    """

    USER_AGENT = "knmi-wind/0.1 (wind push)"

    def __init__(self, url: str = OBSERVATIONS_URL, session: Optional[requests.Session] = None,
                 timeout: Optional[float] = None):
        """
        Args:
            url: Observations page URL.
            session: Optional requests.Session for dependency injection (testing).
            timeout: HTTP request timeout in seconds, None to wait indefinitely.
        """
        self.url = url
        self._session = session or requests.Session()
        self._timeout = timeout
        self._session.headers.setdefault("User-Agent", self.USER_AGENT)

    def fetch_html(self) -> str:
        """Download the observations page and return its body."""
        logger.debug("Fetching observations from %s", self.url)
        response = self._session.get(self.url, timeout=self._timeout)
        response.raise_for_status()
        return response.text

    def fetch_document(self) -> BeautifulSoup:
        """Download and parse the observations page."""
        return StationTableParser.load(self.fetch_html())
