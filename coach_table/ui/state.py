"""Ownership strategies for the table's controllable state.

Each of search term, sort config, current page and selection is held by one
strategy, picked once when the table is built:

* ``OwnedState`` keeps the value itself. ``set`` updates it.
* ``DelegatedState`` forwards every ``set`` to the caller's callback and
  leaves its own value alone; the caller is expected to feed the accepted
  value back through ``receive``.

In both cases a value passed through ``receive`` takes precedence over the
internally held one.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Generic, TypeVar

from coach_table.core.logging import log_json

logger = logging.getLogger(__name__)

V = TypeVar("V")


class StateOwnership(ABC, Generic[V]):
    controlled = False

    def __init__(self, name: str, initial: V, external: V | None = None) -> None:
        self.name = name
        self._value = initial
        self._external = external

    def get(self) -> V:
        if self._external is not None:
            return self._external
        return self._value

    def receive(self, value: V | None) -> None:
        self._external = value

    @abstractmethod
    def set(self, value: V) -> None:
        ...


class OwnedState(StateOwnership[V]):
    def set(self, value: V) -> None:
        self._value = value
        log_json(logger, {"state": self.name, "route": "internal", "value": value}, logging.DEBUG)


class DelegatedState(StateOwnership[V]):
    controlled = True

    def __init__(self, name: str, initial: V, on_change: Callable[[V], None], external: V | None = None) -> None:
        super().__init__(name, initial, external)
        self._on_change = on_change

    def set(self, value: V) -> None:
        log_json(logger, {"state": self.name, "route": "callback", "value": value}, logging.DEBUG)
        self._on_change(value)


def resolve_ownership(
    name: str,
    initial: V,
    external: V | None = None,
    on_change: Callable[[V], None] | None = None,
) -> StateOwnership[V]:
    if on_change is not None:
        return DelegatedState(name, initial, on_change, external)
    return OwnedState(name, initial, external)
