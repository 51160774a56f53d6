"""Network throughput indicator widget."""

from __future__ import annotations

from typing import Callable

from rich.text import Text
from textual.message import Message
from textual.message_pump import MessagePump
from textual.timer import Timer
from textual.widgets import Static

from trafficbar.collectors.connectivity import ConnectivityWatcher, has_default_route
from trafficbar.collectors.counters import read_counters
from trafficbar.models import ByteCounterSample, ThroughputReading, VisibilityInputs
from trafficbar.preferences import INDICATOR_KEY, HideList
from trafficbar.sampler import DEFAULT_INTERVAL, Sampler
from trafficbar.visibility import VisibilityController


class TextualTimerService:
    """One-shot timers on a Textual message pump."""

    def __init__(self, node: MessagePump) -> None:
        self._node = node

    def schedule(self, delay: float, callback: Callable[[], None]) -> Timer:
        return self._node.set_timer(delay, callback)

    def cancel(self, handle: Timer) -> None:
        handle.stop()


class TrafficIndicator(Static):
    """Two-line rate label: the number on top, the unit below.

    Shown only while the user has not hidden it, the screen is on and the
    host is connected. Sampling runs exactly while it is shown.
    """

    DEFAULT_CSS = """
    TrafficIndicator {
        dock: right;
        width: 10;
        height: 2;
        content-align: right middle;
        text-align: right;
    }
    """

    class ReadingUpdated(Message):
        """Fired after every emitted reading."""

        def __init__(self, reading: ThroughputReading) -> None:
            super().__init__()
            self.reading = reading

    class InputsChanged(Message):
        """Fired when any visibility input is set."""

        def __init__(self, inputs: VisibilityInputs, visible: bool) -> None:
            super().__init__()
            self.inputs = inputs
            self.visible = visible

    def __init__(
        self,
        hide_list: HideList,
        counter_source: Callable[[], ByteCounterSample | None] = read_counters,
        connectivity_probe: Callable[[], bool] = has_default_route,
        interval: float = DEFAULT_INTERVAL,
        connectivity_interval: float = 2.0,
        text_color: str = "",
        id: str | None = None,
    ) -> None:
        super().__init__(id=id)
        self._hide_list = hide_list
        self._counter_source = counter_source
        self._connectivity_probe = connectivity_probe
        self._interval = interval
        self._connectivity_interval = connectivity_interval
        self._text_color = text_color
        self._rate_parts: tuple[str, str] | None = None
        self._sampler: Sampler | None = None
        self._controller: VisibilityController | None = None
        self._connectivity: ConnectivityWatcher | None = None
        self._connectivity_timer: Timer | None = None

    @property
    def sampler(self) -> Sampler | None:
        return self._sampler

    @property
    def controller(self) -> VisibilityController | None:
        return self._controller

    @property
    def rate_parts(self) -> tuple[str, str] | None:
        """Last displayed (numeric, unit) pair."""
        return self._rate_parts

    # --- Lifecycle ---

    def on_mount(self) -> None:
        if self._text_color:
            self.set_text_color(self._text_color)
        self._sampler = Sampler(
            self._counter_source,
            TextualTimerService(self),
            self,
            interval=self._interval,
            on_reading=self._on_reading,
        )
        self._controller = VisibilityController(
            self._sampler,
            self,
            hidden_by_user=INDICATOR_KEY in self._hide_list,
        )
        self._hide_list.add_listener(self._on_hide_list)

        self._connectivity = ConnectivityWatcher(
            self._connectivity_probe,
            lambda connected: self.set_disconnected(not connected),
        )
        self._connectivity.poll()
        self._connectivity_timer = self.set_interval(
            self._connectivity_interval,
            self._connectivity.poll,
        )

    def on_unmount(self) -> None:
        self._hide_list.remove_listener(self._on_hide_list)
        if self._connectivity_timer:
            self._connectivity_timer.stop()
            self._connectivity_timer = None
        if self._controller:
            self._controller.shutdown()
            # Late input events after detach are ignored
            self._controller = None

    # --- Visibility inputs ---

    def set_hidden_by_user(self, hidden: bool) -> None:
        self._set_input(lambda c: c.set_hidden_by_user(hidden))

    def set_screen_off(self, screen_off: bool) -> None:
        self._set_input(lambda c: c.set_screen_off(screen_off))

    def set_disconnected(self, disconnected: bool) -> None:
        self._set_input(lambda c: c.set_disconnected(disconnected))

    def _set_input(self, apply: Callable[[VisibilityController], None]) -> None:
        if self._controller is None:
            return
        apply(self._controller)
        self.post_message(
            self.InputsChanged(self._controller.inputs, self._controller.visible)
        )

    def _on_hide_list(self, names: frozenset[str]) -> None:
        self.set_hidden_by_user(INDICATOR_KEY in names)

    def _on_reading(self, reading: ThroughputReading) -> None:
        self.post_message(self.ReadingUpdated(reading))

    # --- Display sink ---

    def set_visible(self, visible: bool) -> None:
        self.display = visible

    def set_text(self, numeric_part: str, unit_part: str) -> None:
        parts = (numeric_part, unit_part)
        # Skip needless relayouts when the label did not change
        if parts == self._rate_parts:
            return
        self._rate_parts = parts
        text = Text(justify="right")
        text.append(numeric_part, style="bold")
        text.append("\n")
        text.append(unit_part, style="dim")
        self.update(text)

    def set_text_color(self, color: str) -> None:
        self.styles.color = color
