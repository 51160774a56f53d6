"""Connectivity detection from the kernel routing tables."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

logger = logging.getLogger(__name__)

RTF_UP = 0x0001


def has_default_route(proc_path: str = "/proc") -> bool:
    """Check whether an IPv4 or IPv6 default route is installed."""
    proc = Path(proc_path)
    return _ipv4_default(proc / "net" / "route") or _ipv6_default(
        proc / "net" / "ipv6_route"
    )


def _read_lines(path: Path) -> list[str]:
    try:
        return path.read_text().splitlines()
    except (FileNotFoundError, PermissionError):
        return []


def _ipv4_default(path: Path) -> bool:
    """/proc/net/route: Iface Destination Gateway Flags ... (hex fields)."""
    for line in _read_lines(path)[1:]:  # Skip header
        fields = line.split()
        if len(fields) < 4:
            continue
        try:
            flags = int(fields[3], 16)
        except ValueError:
            continue
        if fields[1] == "00000000" and flags & RTF_UP:
            return True
    return False


def _ipv6_default(path: Path) -> bool:
    """/proc/net/ipv6_route: dest dest_len src src_len next_hop metric refcnt use flags iface."""
    for line in _read_lines(path):
        fields = line.split()
        if len(fields) < 10:
            continue
        dest, dest_len, flags_hex, iface = fields[0], fields[1], fields[8], fields[9]
        if iface == "lo":
            continue
        try:
            flags = int(flags_hex, 16)
            is_default = int(dest, 16) == 0 and int(dest_len, 16) == 0
        except ValueError:
            continue
        if is_default and flags & RTF_UP:
            return True
    return False


class ConnectivityWatcher:
    """Polls a connectivity probe and reports changes.

    The state is unknown until the first poll, which always delivers.
    """

    def __init__(
        self,
        probe: Callable[[], bool],
        callback: Callable[[bool], None],
    ) -> None:
        self._probe = probe
        self._callback = callback
        self._connected: bool | None = None

    @property
    def connected(self) -> bool | None:
        return self._connected

    def poll(self) -> None:
        connected = self._probe()
        if connected == self._connected:
            return
        logger.debug("connectivity %s -> %s", self._connected, connected)
        self._connected = connected
        self._callback(connected)
