"""Entry point for scheduled invocations (serverless function style)."""

import logging
from typing import Any, Optional

from .config import load_config, LOG_LEVEL, LOG_FORMAT
from .pipeline import run_pipeline

logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO), format=LOG_FORMAT)
logger = logging.getLogger(__name__)


def update(event: Optional[Any] = None, context: Optional[Any] = None) -> str:
    """
    Push the configured station's wind to the device.

    Returns:
        The summary line, e.g. 'SW, 4 BFT, 5.5 m/s - Pushed windSpeed - Pushed windDir'
    """
    config = load_config()
    try:
        summary = run_pipeline(config)
    except Exception:
        logger.exception(f"Could not update wind for station {config.station}")
        raise
    logger.info(summary.text)
    return summary.text
