"""Tests for the scheduled entry point."""

import logging
from unittest.mock import patch, MagicMock

import pytest
import requests

from knmi_wind import handler
from knmi_wind.config import PushConfig


CONFIG = PushConfig(device_id='dev123', access_token='tok', station='De Bilt')


def test_update_returns_summary_text(caplog):
    summary = MagicMock(text="SW, 4 BFT, 5.5 m/s - Pushed windSpeed - Pushed windDir")
    with patch.object(handler, 'load_config', return_value=CONFIG), \
            patch.object(handler, 'run_pipeline', return_value=summary) as run:
        with caplog.at_level(logging.INFO, logger='knmi_wind.handler'):
            result = handler.update({}, None)

    assert result == summary.text
    run.assert_called_once_with(CONFIG)
    assert summary.text in caplog.text


def test_update_reraises_fetch_error():
    with patch.object(handler, 'load_config', return_value=CONFIG), \
            patch.object(handler, 'run_pipeline', side_effect=requests.ConnectionError("offline")):
        with pytest.raises(requests.ConnectionError):
            handler.update({}, None)
