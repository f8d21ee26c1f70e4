"""
Push result models.

A push always produces a PushOutcome, whether or not the device accepted
the value. The text shown to operators is fixed; the exception, if any,
is kept on the outcome for diagnostics.
"""

from dataclasses import dataclass, field
from typing import Optional

from .reading import StationReading, NormalizedSignal


@dataclass(frozen=True)
class PushOutcome:
    """Result of pushing one named value to a device."""

    signal_name: str
    value: str
    error: Optional[BaseException] = field(default=None, compare=False)

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @property
    def result_text(self) -> str:
        if self.succeeded:
            return f"Pushed {self.signal_name}"
        return f"Could not push {self.signal_name}"

    def __str__(self) -> str:
        return self.result_text

    @classmethod
    def success(cls, signal_name: str, value: str) -> 'PushOutcome':
        return cls(signal_name=signal_name, value=value)

    @classmethod
    def failure(cls, signal_name: str, value: str, error: BaseException) -> 'PushOutcome':
        return cls(signal_name=signal_name, value=value, error=error)


@dataclass(frozen=True)
class PushSummary:
    """
    Outcome of one pipeline run.

    Attributes:
        reading: Reading the signal was derived from
        signal: Direction and Beaufort codes that were pushed
        speed_outcome: Result of the windSpeed push
        direction_outcome: Result of the windDir push
        station_found: False when the default reading was used
    """

    reading: StationReading
    signal: NormalizedSignal
    speed_outcome: PushOutcome
    direction_outcome: PushOutcome
    station_found: bool = True

    @property
    def all_pushed(self) -> bool:
        return self.speed_outcome.succeeded and self.direction_outcome.succeeded

    @property
    def text(self) -> str:
        return (
            f"{self.signal.direction}, {self.signal.beaufort} BFT, {self.reading.raw_speed} m/s"
            f" - {self.speed_outcome.result_text} - {self.direction_outcome.result_text}"
        )

    def __str__(self) -> str:
        return self.text
