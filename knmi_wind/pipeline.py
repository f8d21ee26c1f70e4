"""
KNMI wind push pipeline.

Fetch the observations page, pick out the configured station, convert its
wind reading to device codes and push both codes to the device.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

import requests

from .config import PushConfig
from .models import StationReading, NormalizedSignal, PushSummary
from .notifiers import DeviceNotifier, ParticleNotifier
from .parsers import StationTableParser
from .sources import KnmiWebSource

logger = logging.getLogger(__name__)

SPEED_SIGNAL = 'windSpeed'
DIRECTION_SIGNAL = 'windDir'


class WeatherPushPipeline:
    """Runs one fetch, convert and push cycle for a single station."""

    def __init__(self, source: KnmiWebSource, notifier: DeviceNotifier, station: str,
                 parser: Optional[StationTableParser] = None):
        """
        Args:
            source: Provides the parsed observations page
            notifier: Delivers the codes to the device
            station: Name of the station to report (case-insensitive)
            parser: Observations table parser
        """
        self.source = source
        self.notifier = notifier
        self.station = station
        self.parser = parser or StationTableParser()

    def run(self) -> PushSummary:
        """
        Execute the pipeline.

        Fetch and parse errors propagate and no push is attempted. Push
        failures never raise; they show up in the summary text.

        Returns:
            PushSummary of the reading and both push outcomes
        """
        document = self.source.fetch_document()
        found = self.parser.find_station(document, self.station)
        if found is None:
            logger.info(f"Station {self.station} not found, using default reading")
            reading = StationReading.default(self.station)
        else:
            reading = found

        signal = NormalizedSignal.from_reading(reading)
        logger.debug(f"{reading.station}: {reading.raw_direction} -> {signal.direction}, "
                     f"{reading.raw_speed} m/s -> {signal.beaufort} BFT")

        with ThreadPoolExecutor(max_workers=2) as executor:
            speed_future = executor.submit(self.notifier.push, SPEED_SIGNAL, signal.beaufort)
            direction_future = executor.submit(self.notifier.push, DIRECTION_SIGNAL, signal.direction)
            speed_outcome = speed_future.result()
            direction_outcome = direction_future.result()

        return PushSummary(
            reading=reading,
            signal=signal,
            speed_outcome=speed_outcome,
            direction_outcome=direction_outcome,
            station_found=found is not None,
        )


def build_pipeline(config: PushConfig, session: Optional[requests.Session] = None) -> WeatherPushPipeline:
    """Create a pipeline with a fresh source and notifier for this run."""
    source = KnmiWebSource(url=config.observations_url, session=session)
    notifier = ParticleNotifier(config.device_id, config.access_token, session=session)
    return WeatherPushPipeline(source, notifier, config.station)


def run_pipeline(config: PushConfig, session: Optional[requests.Session] = None) -> PushSummary:
    """Run the pipeline once with the given configuration."""
    return build_pipeline(config, session=session).run()
