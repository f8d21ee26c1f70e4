import pytest
from pathlib import Path
from unittest.mock import MagicMock


class MockResponse:
    """Minimal mock for requests.Response."""

    def __init__(self, text="", status_code=200, json_data=None):
        self.text = text
        self.status_code = status_code
        self._json_data = json_data

    def raise_for_status(self):
        if self.status_code >= 400:
            from requests.exceptions import HTTPError
            raise HTTPError(f"HTTP {self.status_code}")

    def json(self):
        if self._json_data is None:
            raise ValueError("No JSON body")
        return self._json_data


def make_session(response_text="", status_code=200, json_data=None):
    """Create a mock session returning a fixed response to GET and POST."""
    session = MagicMock()
    session.headers = {}
    response = MockResponse(response_text, status_code, json_data)
    session.get.return_value = response
    session.post.return_value = response
    return session


@pytest.fixture
def test_assets_dir() -> Path:
    """Return the path to the test assets directory."""
    return Path(__file__).parent / 'assets'


@pytest.fixture
def observations_html(test_assets_dir) -> str:
    """Return the sample KNMI observations page."""
    return (test_assets_dir / 'html' / 'knmi_waarnemingen.html').read_text(encoding='utf-8')


@pytest.fixture
def session_factory():
    """Return a factory building mock sessions with a fixed response."""
    return make_session
