#!/usr/bin/env python3

import sys
import argparse
import logging
from typing import List, Optional

import requests

from knmi_wind.config import load_config, ConfigurationError, LOG_FORMAT
from knmi_wind.parsers import StationTableParser
from knmi_wind.pipeline import build_pipeline
from knmi_wind.utils import translate_direction, beaufort_for_ms

logger = logging.getLogger(__name__)


def list_stations(pipeline) -> None:
    document = pipeline.source.fetch_document()
    for reading in StationTableParser().parse_rows(document):
        direction = translate_direction(reading.raw_direction)
        print(f"{reading.station:<30} {direction:<4} {reading.raw_speed:>5} m/s "
              f"{beaufort_for_ms(reading.raw_speed)} BFT")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Push KNMI wind observations to a Particle device')
    parser.add_argument('-c', '--config', help='JSON configuration file (default: $KNMI_WIND_CONFIG or config.json)')
    parser.add_argument('--station', help='Weather station name, overrides configuration')
    parser.add_argument('--device-id', help='Particle device id, overrides configuration')
    parser.add_argument('--list-stations', help='List stations in the observations table and exit', action='store_true')
    parser.add_argument('-v', '--verbose', help='Verbose output', action='store_true')

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format=LOG_FORMAT)

    try:
        config = load_config(args.config)
    except ConfigurationError as e:
        logger.error(str(e))
        return 1
    config = config.with_overrides(station=args.station, device_id=args.device_id)

    pipeline = build_pipeline(config)
    try:
        if args.list_stations:
            list_stations(pipeline)
            return 0
        summary = pipeline.run()
    except requests.RequestException as e:
        logger.error(f"Could not fetch observations from {config.observations_url}: {e}")
        return 1

    print(summary.text)
    return 0


if __name__ == '__main__':
    sys.exit(main())
