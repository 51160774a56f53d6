"""Cumulative byte counter collector reading /proc/net/dev."""

from __future__ import annotations

from pathlib import Path

from trafficbar.models import ByteCounterSample

LOOPBACK = "lo"


def read_counters(
    proc_path: str = "/proc",
    interface: str = "",
) -> ByteCounterSample | None:
    """Read total rx/tx bytes from /proc/net/dev.

    Sums every non-loopback interface unless ``interface`` names one.
    Returns None if the file is unavailable or the interface is absent.
    """
    try:
        text = (Path(proc_path) / "net" / "dev").read_text()
    except (FileNotFoundError, PermissionError):
        return None
    return parse_net_dev(text, interface)


def parse_net_dev(text: str, interface: str = "") -> ByteCounterSample | None:
    """Parse /proc/net/dev content.

    Each data line looks like ``  eth0: 1234 10 0 0 0 0 0 0 5678 ...`` where
    field 0 is rx bytes and field 8 is tx bytes.
    """
    rx_total = 0
    tx_total = 0
    found = False

    for line in text.splitlines()[2:]:  # Two header lines
        name, sep, data = line.partition(":")
        if not sep:
            continue
        name = name.strip()
        if interface:
            if name != interface:
                continue
        elif name == LOOPBACK:
            continue
        fields = data.split()
        if len(fields) < 9:
            continue
        try:
            rx_total += int(fields[0])
            tx_total += int(fields[8])
        except ValueError:
            continue
        found = True

    if interface and not found:
        return None
    return ByteCounterSample(rx_bytes=rx_total, tx_bytes=tx_total)
