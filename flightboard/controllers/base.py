"""Observable state plumbing shared by the controllers."""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, TypeVar

from pydantic import BaseModel

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=BaseModel)

Listener = Callable[[S], None]


class StateHolder(Generic[S]):
    """Holds one frozen state snapshot and notifies listeners on change.

    ``update`` swaps in a whole new snapshot, so a listener always receives
    a consistent state. Listeners run synchronously, in subscription order.
    """

    def __init__(self, initial: S):
        self._value = initial
        self._listeners: list[Listener[S]] = []

    @property
    def value(self) -> S:
        return self._value

    def update(self, **changes: Any) -> S:
        self._value = self._value.model_copy(update=changes)
        for listener in list(self._listeners):
            try:
                listener(self._value)
            except Exception:
                logger.exception("State listener %r failed", listener)
        return self._value

    def subscribe(self, listener: Listener[S]) -> Callable[[], None]:
        """Register ``listener`` and call it once with the current state.

        Returns a callable that removes the listener.
        """
        self._listeners.append(listener)
        listener(self._value)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe


class BaseController(Generic[S]):
    """A controller owns its state exclusively; only its operations mutate it."""

    def __init__(self, initial: S):
        self._state = StateHolder(initial)

    @property
    def state(self) -> S:
        return self._state.value

    def subscribe(self, listener: Listener[S]) -> Callable[[], None]:
        return self._state.subscribe(listener)

    def _set(self, **changes: Any) -> S:
        return self._state.update(**changes)
