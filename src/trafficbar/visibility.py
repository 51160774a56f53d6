"""Visibility state machine driving the sampler."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Protocol

from trafficbar.models import VisibilityInputs

logger = logging.getLogger(__name__)


class VisibilitySink(Protocol):
    def set_visible(self, visible: bool) -> None: ...


class SamplerControl(Protocol):
    def start(self) -> None: ...

    def stop(self) -> None: ...


class VisibilityController:
    """Derives one visibility decision from three independent signals.

    Signals may arrive in any order and repeat. Only a change of the derived
    flag touches the display or the sampler, so duplicates are absorbed and
    the sampler runs exactly while the indicator is shown.
    """

    def __init__(
        self,
        sampler: SamplerControl,
        sink: VisibilitySink,
        hidden_by_user: bool = False,
    ) -> None:
        self._sampler = sampler
        self._sink = sink
        # Stay hidden until connectivity is confirmed.
        self._inputs = VisibilityInputs(
            hidden_by_user=hidden_by_user,
            screen_off=False,
            disconnected=True,
        )
        self._visible = False
        self._sink.set_visible(False)

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def inputs(self) -> VisibilityInputs:
        return replace(self._inputs)

    def set_hidden_by_user(self, hidden: bool) -> None:
        self._inputs.hidden_by_user = hidden
        self._reevaluate()

    def set_screen_off(self, screen_off: bool) -> None:
        self._inputs.screen_off = screen_off
        self._reevaluate()

    def set_disconnected(self, disconnected: bool) -> None:
        self._inputs.disconnected = disconnected
        self._reevaluate()

    def shutdown(self) -> None:
        """Stop sampling regardless of the current visibility."""
        self._sampler.stop()

    def _reevaluate(self) -> None:
        visible = self._inputs.visible
        if visible == self._visible:
            return
        logger.debug(
            "visibility %s -> %s (hidden=%s screen_off=%s disconnected=%s)",
            self._visible,
            visible,
            self._inputs.hidden_by_user,
            self._inputs.screen_off,
            self._inputs.disconnected,
        )
        self._visible = visible
        self._sink.set_visible(visible)
        if visible:
            self._sampler.start()
        else:
            self._sampler.stop()
