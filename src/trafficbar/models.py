"""Data models for Trafficbar."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class ByteCounterSample:
    """Cumulative rx/tx byte counters read from the host at one instant."""

    rx_bytes: int
    tx_bytes: int


@dataclass(frozen=True)
class ThroughputReading:
    """Average rx/tx rates in bytes per second over one sampling interval."""

    rx_rate: float = 0.0
    tx_rate: float = 0.0

    @property
    def display_rate(self) -> float:
        return max(self.rx_rate, self.tx_rate)

    @classmethod
    def between(
        cls,
        previous: ByteCounterSample,
        current: ByteCounterSample,
        interval_seconds: float,
    ) -> ThroughputReading:
        """Build a reading from two consecutive samples.

        Counters can go backwards after an interface reset; such deltas are
        clamped to zero instead of producing a negative rate.
        """
        rx = max(0, current.rx_bytes - previous.rx_bytes)
        tx = max(0, current.tx_bytes - previous.tx_bytes)
        return cls(rx_rate=rx / interval_seconds, tx_rate=tx / interval_seconds)


class SamplerState(Enum):
    """Sampler lifecycle."""

    STOPPED = "stopped"
    RUNNING = "running"


@dataclass
class VisibilityInputs:
    """The three independent signals that decide whether the indicator shows."""

    hidden_by_user: bool = False
    screen_off: bool = False
    disconnected: bool = True

    @property
    def visible(self) -> bool:
        return not self.hidden_by_user and not self.screen_off and not self.disconnected
