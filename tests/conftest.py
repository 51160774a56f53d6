"""Shared test fixtures for Trafficbar tests."""

from __future__ import annotations

import textwrap

import pytest

from trafficbar.config import AppConfig
from trafficbar.models import ByteCounterSample


class FakeTimerService:
    """Deterministic TimerService: timers fire only when a test says so."""

    def __init__(self):
        self._next_id = 0
        self.pending: dict[int, tuple[float, object]] = {}
        self.scheduled: list[tuple[float, object]] = []

    def schedule(self, delay, callback):
        self._next_id += 1
        self.pending[self._next_id] = (delay, callback)
        self.scheduled.append((delay, callback))
        return self._next_id

    def cancel(self, handle):
        self.pending.pop(handle, None)

    def fire(self) -> None:
        """Run the oldest pending timer."""
        handle = min(self.pending)
        _delay, callback = self.pending.pop(handle)
        callback()


class FakeCounters:
    """Counter source returning queued samples; the last one repeats."""

    def __init__(self, *samples):
        self.samples = [ByteCounterSample(rx, tx) for rx, tx in samples]
        self.reads = 0

    def push(self, rx, tx):
        self.samples.append(ByteCounterSample(rx, tx))

    def __call__(self):
        self.reads += 1
        if len(self.samples) > 1:
            return self.samples.pop(0)
        return self.samples[0]


class FakeSink:
    """Records every display call."""

    def __init__(self):
        self.texts: list[tuple[str, str]] = []
        self.visibility: list[bool] = []

    def set_text(self, numeric_part, unit_part):
        self.texts.append((numeric_part, unit_part))

    def set_visible(self, visible):
        self.visibility.append(visible)


class FakeSampler:
    """Counts start/stop calls made by the visibility controller."""

    def __init__(self):
        self.starts = 0
        self.stops = 0

    def start(self):
        self.starts += 1

    def stop(self):
        self.stops += 1


@pytest.fixture
def timers():
    return FakeTimerService()


@pytest.fixture
def sink():
    return FakeSink()


@pytest.fixture
def fake_sampler():
    return FakeSampler()


@pytest.fixture
def tmp_proc(tmp_path):
    """Create a mock /proc tree with net/dev and routing tables."""
    net_dir = tmp_path / "net"
    net_dir.mkdir()

    dev_content = textwrap.dedent("""\
        Inter-|   Receive                                                |  Transmit
         face |bytes    packets errs drop fifo frame compressed multicast|bytes    packets errs drop fifo colls carrier compressed
            lo:  500000    1000    0    0    0     0          0         0   500000    1000    0    0    0     0       0          0
          eth0: 1000000    2000    0    0    0     0          0         0   250000    1500    0    0    0     0       0          0
         wlan0:    3000      30    0    0    0     0          0         0     1000      20    0    0    0     0       0          0
    """)
    (net_dir / "dev").write_text(dev_content)

    route_content = textwrap.dedent("""\
        Iface\tDestination\tGateway \tFlags\tRefCnt\tUse\tMetric\tMask\t\tMTU\tWindow\tIRTT
        eth0\t00000000\t0101A8C0\t0003\t0\t0\t100\t00000000\t0\t0\t0
        eth0\t0001A8C0\t00000000\t0001\t0\t0\t100\t00FFFFFF\t0\t0\t0
    """)
    (net_dir / "route").write_text(route_content)
    (net_dir / "ipv6_route").write_text("")

    return tmp_path


@pytest.fixture
def sample_config(tmp_path):
    """Create a sample config file and return its path."""
    config_content = textwrap.dedent("""\
        interface = "wlan0"

        [refresh]
        interval = 2
        connectivity_interval = 5.0

        [indicator]
        hide = ["network_traffic", "clock"]
        color = "green"

        [log]
        level = "DEBUG"
    """)
    config_file = tmp_path / "config.toml"
    config_file.write_text(config_content)
    return config_file


@pytest.fixture
def default_config():
    """Return a default AppConfig."""
    return AppConfig()
