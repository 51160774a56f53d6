"""Bottom status bar showing the indicator's inputs and last reading."""

from __future__ import annotations

from textual.widgets import Static

from trafficbar.models import ThroughputReading, VisibilityInputs
from trafficbar.utils import format_rate


def _rate(value: float) -> str:
    return " ".join(format_rate(value))


class StatusBar(Static):
    """Bottom bar: hide preference, screen, network, sampling and rx/tx rates."""

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: 1;
        background: $surface;
        color: $text-muted;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self._inputs = VisibilityInputs()
        self._visible = False
        self._reading: ThroughputReading | None = None

    def on_mount(self) -> None:
        self._refresh_display()

    def update_inputs(self, inputs: VisibilityInputs, visible: bool) -> None:
        self._inputs = inputs
        self._visible = visible
        if not visible:
            self._reading = None
        self._refresh_display()

    def update_reading(self, reading: ThroughputReading) -> None:
        self._reading = reading
        self._refresh_display()

    @property
    def status_text(self) -> str:
        inputs = self._inputs
        parts = [
            f" Hidden: {'yes' if inputs.hidden_by_user else 'no'}",
            f"Screen: {'off' if inputs.screen_off else 'on'}",
            f"Net: {'down' if inputs.disconnected else 'up'}",
            f"Sampling: {'on' if self._visible else 'off'}",
        ]
        if self._reading:
            parts.append(
                f"↓{_rate(self._reading.rx_rate)} ↑{_rate(self._reading.tx_rate)}"
            )
        return " | ".join(parts) + " "

    def _refresh_display(self) -> None:
        self.update(self.status_text)
