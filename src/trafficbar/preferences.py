"""User hide-list preference: the set of indicators the user suppressed."""

from __future__ import annotations

from typing import Callable, Iterable

INDICATOR_KEY = "network_traffic"

Listener = Callable[[frozenset[str]], None]


def parse_hide_list(value: str | None) -> frozenset[str]:
    """Parse a comma-separated hide-list, e.g. "network_traffic,clock"."""
    if not value:
        return frozenset()
    return frozenset(part.strip() for part in value.split(",") if part.strip())


class HideList:
    """Observable set of hidden indicator names.

    Listeners receive the current set once when they subscribe and again on
    every change.
    """

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names = frozenset(names)
        self._listeners: list[Listener] = []

    @property
    def names(self) -> frozenset[str]:
        return self._names

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)
        listener(self._names)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def replace(self, names: Iterable[str]) -> None:
        names = frozenset(names)
        if names == self._names:
            return
        self._names = names
        for listener in list(self._listeners):
            listener(names)

    def toggle(self, name: str) -> bool:
        """Flip membership of ``name``; returns True if it is now hidden."""
        if name in self._names:
            self.replace(self._names - {name})
            return False
        self.replace(self._names | {name})
        return True
