"""Main dashboard screen hosting the traffic indicator."""

from __future__ import annotations

from typing import Callable

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import Footer, Static

from trafficbar.collectors.connectivity import has_default_route
from trafficbar.collectors.counters import read_counters
from trafficbar.config import AppConfig
from trafficbar.models import ByteCounterSample
from trafficbar.preferences import HideList
from trafficbar.widgets.status_bar import StatusBar
from trafficbar.widgets.traffic_indicator import TrafficIndicator


class DashboardScreen(Screen):
    """Top bar with the indicator, a status bar with its inputs.

    While another screen covers this one the indicator counts as screen-off.
    """

    DEFAULT_CSS = """
    #top-bar {
        dock: top;
        height: 2;
        background: $accent;
        color: $text;
    }
    #title {
        width: 1fr;
        text-style: bold;
    }
    """

    def __init__(
        self,
        config: AppConfig,
        hide_list: HideList,
        counter_source: Callable[[], ByteCounterSample | None] | None = None,
        connectivity_probe: Callable[[], bool] | None = None,
    ) -> None:
        super().__init__()
        self.config = config
        self.hide_list = hide_list

        if counter_source is None:
            def counter_source() -> ByteCounterSample | None:
                return read_counters(proc_path=config.proc_path, interface=config.interface)

        if connectivity_probe is None:
            def connectivity_probe() -> bool:
                return has_default_route(proc_path=config.proc_path)

        self._counter_source = counter_source
        self._connectivity_probe = connectivity_probe

    def compose(self) -> ComposeResult:
        with Horizontal(id="top-bar"):
            yield Static(f" Trafficbar | {self.config.interface or 'all interfaces'}", id="title")
            yield TrafficIndicator(
                self.hide_list,
                counter_source=self._counter_source,
                connectivity_probe=self._connectivity_probe,
                interval=self.config.interval,
                connectivity_interval=self.config.connectivity_interval,
                text_color=self.config.text_color,
                id="traffic",
            )
        yield StatusBar()
        yield Footer()

    @property
    def indicator(self) -> TrafficIndicator:
        return self.query_one(TrafficIndicator)

    @property
    def _status(self) -> StatusBar:
        return self.query_one(StatusBar)

    # --- Events ---

    def on_screen_suspend(self) -> None:
        for indicator in self.query(TrafficIndicator):
            indicator.set_screen_off(True)

    def on_screen_resume(self) -> None:
        for indicator in self.query(TrafficIndicator):
            indicator.set_screen_off(False)

    def on_traffic_indicator_inputs_changed(self, event: TrafficIndicator.InputsChanged) -> None:
        self._status.update_inputs(event.inputs, event.visible)

    def on_traffic_indicator_reading_updated(self, event: TrafficIndicator.ReadingUpdated) -> None:
        self._status.update_reading(event.reading)
