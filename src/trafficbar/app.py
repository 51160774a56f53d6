"""Trafficbar Textual application."""

from __future__ import annotations

from typing import Callable

from textual.app import App

from trafficbar.config import AppConfig
from trafficbar.models import ByteCounterSample
from trafficbar.preferences import INDICATOR_KEY, HideList
from trafficbar.screens.dashboard import DashboardScreen


class TrafficBarApp(App):
    """Main Trafficbar TUI application."""

    TITLE = "Trafficbar"

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("h", "toggle_hidden", "Hide"),
        ("question_mark", "help", "Help"),
    ]

    def __init__(
        self,
        config: AppConfig,
        counter_source: Callable[[], ByteCounterSample | None] | None = None,
        connectivity_probe: Callable[[], bool] | None = None,
    ) -> None:
        super().__init__()
        self.config = config
        self.hide_list = HideList(config.hide)
        self._counter_source = counter_source
        self._connectivity_probe = connectivity_probe

    def on_mount(self) -> None:
        self.push_screen(
            DashboardScreen(
                config=self.config,
                hide_list=self.hide_list,
                counter_source=self._counter_source,
                connectivity_probe=self._connectivity_probe,
            )
        )

    def action_toggle_hidden(self) -> None:
        hidden = self.hide_list.toggle(INDICATOR_KEY)
        self.notify("Traffic indicator hidden" if hidden else "Traffic indicator shown")

    def action_help(self) -> None:
        from trafficbar.screens.help_screen import HelpScreen

        self.push_screen(HelpScreen())
