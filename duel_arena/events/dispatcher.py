"""Typed event dispatcher.

Listeners register for an event class and are called synchronously, in
registration order, with the event instance.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, TypeVar

if TYPE_CHECKING:
    from duel_arena.game.models import Combatant

logger = logging.getLogger(__name__)

E = TypeVar("E")
Listener = Callable[[Any], None]


@dataclass(frozen=True)
class FightStartingEvent:
    """Dispatched once before the first round of a fight."""

    player: Combatant
    ai: Combatant


class EventDispatcher:
    """Minimal synchronous dispatcher keyed by event type."""

    def __init__(self) -> None:
        self._listeners: dict[type, list[Listener]] = {}

    def add_listener(self, event_type: type, listener: Listener) -> None:
        """Register a listener for an event type. Duplicates are ignored."""
        listeners = self._listeners.setdefault(event_type, [])
        if listener not in listeners:
            listeners.append(listener)
            logger.debug(f"Added listener {listener!r} for {event_type.__name__}")

    def remove_listener(self, event_type: type, listener: Listener) -> None:
        listeners = self._listeners.get(event_type)
        if not listeners or listener not in listeners:
            return
        listeners.remove(listener)
        if not listeners:
            del self._listeners[event_type]

    def get_listeners(self, event_type: type) -> list[Listener]:
        return list(self._listeners.get(event_type, []))

    def dispatch(self, event: E) -> E:
        """Call every listener registered for the event's type.

        Returns:
            The event, so callers can chain on it
        """
        listeners = self.get_listeners(type(event))
        logger.debug(f"Dispatching {type(event).__name__} to {len(listeners)} listener(s)")
        for listener in listeners:
            listener(event)
        return event


def log_fight_starting(event: FightStartingEvent) -> None:
    """Listener that writes the fight start to the log."""
    player = getattr(event.player, "name", type(event.player).__name__)
    ai = getattr(event.ai, "name", type(event.ai).__name__)
    logger.info(f"Fight starting: {player} vs {ai}")
