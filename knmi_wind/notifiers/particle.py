"""Particle Cloud device notifier."""

import logging
from typing import Optional

import requests

from .base import DeviceNotifier
from ..models.push import PushOutcome

logger = logging.getLogger(__name__)

PARTICLE_API_URL = "https://api.particle.io/v1"


class DeviceRejectedError(Exception):
    """Raised when the Particle Cloud answers but reports the call as failed."""


class ParticleNotifier(DeviceNotifier):
    """
    Call a cloud function on a Particle device.

    Uses the Particle Cloud REST API: POST /devices/{device_id}/{function}
    with the value in the ``arg`` form field.

    Example:
        notifier = ParticleNotifier("0123456789abcdef", "token")
        outcome = notifier.push("windDir", "SW")
        print(outcome.result_text)
    """

    def __init__(self, device_id: str, access_token: str, session: Optional[requests.Session] = None,
                 base_url: str = PARTICLE_API_URL):
        """
        Args:
            device_id: Particle device id
            access_token: Particle access token
            session: Optional requests.Session for dependency injection (testing).
            base_url: Particle Cloud API root
        """
        self.device_id = device_id
        self._access_token = access_token
        self._session = session or requests.Session()
        self.base_url = base_url.rstrip('/')

    def _function_url(self, name: str) -> str:
        return f"{self.base_url}/devices/{self.device_id}/{name}"

    def _call_function(self, name: str, value: str) -> None:
        response = self._session.post(
            self._function_url(name),
            data={"arg": value},
            headers={"Authorization": f"Bearer {self._access_token}"},
        )
        response.raise_for_status()
        try:
            body = response.json()
        except ValueError:
            body = {}
        if isinstance(body, dict) and body.get("ok") is False:
            raise DeviceRejectedError(body.get("error", f"Device rejected {name}"))

    def push(self, name: str, value: str) -> PushOutcome:
        logger.debug("Pushing %s=%s to device %s", name, value, self.device_id)
        try:
            self._call_function(name, value)
        except Exception as e:
            logger.warning("Particle push failed for %s: %s", name, e)
            return PushOutcome.failure(name, value, e)
        return PushOutcome.success(name, value)
