"""Periodic throughput sampler turning cumulative counters into a rate label."""

from __future__ import annotations

import logging
from typing import Any, Callable, Protocol

from trafficbar.models import ByteCounterSample, SamplerState, ThroughputReading
from trafficbar.utils import format_rate

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 1.5

CounterSource = Callable[[], "ByteCounterSample | None"]


class TimerService(Protocol):
    """Shared one-shot scheduling facility."""

    def schedule(self, delay: float, callback: Callable[[], None]) -> Any: ...

    def cancel(self, handle: Any) -> None: ...


class TextSink(Protocol):
    def set_text(self, numeric_part: str, unit_part: str) -> None: ...


class RepeatingTimer:
    """Cancellable repeating timer built on a one-shot TimerService.

    Every firing reschedules the next one. Each start() opens a new
    generation; a firing that belongs to an older generation is dropped, so
    a callback already queued when cancel() ran never reaches the owner.
    """

    def __init__(
        self,
        timer_service: TimerService,
        interval: float,
        callback: Callable[[], None],
    ) -> None:
        self._timer_service = timer_service
        self._interval = interval
        self._callback = callback
        self._handle: Any = None
        self._generation = 0
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def start(self) -> None:
        self.cancel()
        self._active = True
        self._schedule(self._generation)

    def cancel(self) -> None:
        if self._handle is not None:
            self._timer_service.cancel(self._handle)
            self._handle = None
        self._generation += 1
        self._active = False

    def _schedule(self, generation: int) -> None:
        self._handle = self._timer_service.schedule(
            self._interval, lambda: self._fire(generation)
        )

    def _fire(self, generation: int) -> None:
        if generation != self._generation or not self._active:
            return
        self._handle = None
        try:
            self._callback()
        finally:
            # The callback may have cancelled us.
            if generation == self._generation and self._active:
                self._schedule(generation)


class Sampler:
    """Reads byte counters every interval and emits a formatted rate.

    The baseline is taken when sampling starts, so the first tick reports
    the traffic of its own interval rather than the lifetime totals.
    """

    def __init__(
        self,
        counter_source: CounterSource,
        timer_service: TimerService,
        sink: TextSink,
        interval: float = DEFAULT_INTERVAL,
        on_reading: Callable[[ThroughputReading], None] | None = None,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval!r}")
        self._counter_source = counter_source
        self._sink = sink
        self._interval = interval
        self._on_reading = on_reading
        self._timer = RepeatingTimer(timer_service, interval, self._tick)
        self._state = SamplerState.STOPPED
        self._baseline: ByteCounterSample | None = None

    @property
    def state(self) -> SamplerState:
        return self._state

    @property
    def running(self) -> bool:
        return self._state is SamplerState.RUNNING

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def baseline(self) -> ByteCounterSample | None:
        return self._baseline

    def start(self) -> None:
        if self.running:
            self.stop()
        self._state = SamplerState.RUNNING
        self._baseline = self._read()
        logger.debug("Sampler started, baseline=%s", self._baseline)
        self._timer.start()

    def stop(self) -> None:
        if not self.running:
            return
        self._timer.cancel()
        self._state = SamplerState.STOPPED
        self._baseline = None
        logger.debug("Sampler stopped")

    def _read(self) -> ByteCounterSample | None:
        try:
            return self._counter_source()
        except (OSError, ValueError) as e:
            logger.debug("Counter read failed: %s", e)
            return None

    def _tick(self) -> None:
        if not self.running:
            return
        current = self._read()
        if current is None:
            logger.debug("No counters this tick, keeping baseline %s", self._baseline)
            return
        previous = self._baseline
        self._baseline = current
        if previous is None:
            # Baseline read failed at start; this tick only establishes it.
            return

        reading = ThroughputReading.between(previous, current, self._interval)
        logger.debug(
            "tick rx=%.0f B/s tx=%.0f B/s baseline=%s",
            reading.rx_rate,
            reading.tx_rate,
            current,
        )
        self._sink.set_text(*format_rate(reading.display_rate))
        if self._on_reading:
            self._on_reading(reading)
