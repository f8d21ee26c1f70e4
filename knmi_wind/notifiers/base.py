from abc import ABC, abstractmethod

from ..models.push import PushOutcome


class DeviceNotifier(ABC):
    """Base interface for sending a named value to a remote device."""

    @abstractmethod
    def push(self, name: str, value: str) -> PushOutcome:
        """
        Deliver one value to the device.

        Implementations must not raise: any failure is reported through
        the returned PushOutcome.

        Args:
            name: Name of the device function (e.g. 'windSpeed')
            value: Argument passed to the function

        Returns:
            PushOutcome describing whether the device accepted the value
        """
        pass
