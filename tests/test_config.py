"""Tests for configuration loading."""

import json

import pytest

from knmi_wind.config import load_config, PushConfig, ConfigurationError, ENV_OVERRIDES, CONFIG_PATH_ENV
from knmi_wind.sources import OBSERVATIONS_URL


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for env_name in list(ENV_OVERRIDES.values()) + [CONFIG_PATH_ENV]:
        monkeypatch.delenv(env_name, raising=False)


def write_config(path, data):
    path.write_text(json.dumps(data))
    return path


def test_load_from_file(tmp_path):
    path = write_config(tmp_path / 'config.json', {
        'DEVICE_ID': 'dev123',
        'ACCESS_TOKEN': 'tok',
        'WEATHER_STATION': 'De Bilt',
    })
    config = load_config(path)

    assert config == PushConfig(device_id='dev123', access_token='tok', station='De Bilt')
    assert config.observations_url == OBSERVATIONS_URL


def test_environment_overrides_file(tmp_path, monkeypatch):
    path = write_config(tmp_path / 'config.json', {'DEVICE_ID': 'dev123', 'WEATHER_STATION': 'De Bilt'})
    monkeypatch.setenv('KNMI_WIND_STATION', 'Schiphol')
    monkeypatch.setenv('KNMI_WIND_ACCESS_TOKEN', 'env-token')

    config = load_config(path)

    assert config.device_id == 'dev123'
    assert config.station == 'Schiphol'
    assert config.access_token == 'env-token'


def test_config_path_from_environment(tmp_path, monkeypatch):
    path = write_config(tmp_path / 'other.json', {'WEATHER_STATION': 'Twenthe'})
    monkeypatch.setenv(CONFIG_PATH_ENV, str(path))

    assert load_config().station == 'Twenthe'


def test_missing_file_is_not_an_error(tmp_path):
    config = load_config(tmp_path / 'missing.json')
    assert config == PushConfig(device_id='', access_token='', station='')


def test_invalid_json(tmp_path):
    path = tmp_path / 'config.json'
    path.write_text('{not json')

    with pytest.raises(ConfigurationError):
        load_config(path)


def test_json_must_be_object(tmp_path):
    path = write_config(tmp_path / 'config.json', ['DEVICE_ID'])

    with pytest.raises(ConfigurationError):
        load_config(path)


def test_with_overrides_ignores_none():
    config = PushConfig(device_id='dev123', access_token='tok', station='De Bilt')
    updated = config.with_overrides(station='Schiphol', device_id=None)

    assert updated.station == 'Schiphol'
    assert updated.device_id == 'dev123'
