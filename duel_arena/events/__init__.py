"""Fight events and observers."""

from duel_arena.events.dispatcher import (
    EventDispatcher,
    FightStartingEvent,
    log_fight_starting,
)
from duel_arena.events.observers import GameObserver, ObserverRegistry

__all__ = [
    "EventDispatcher",
    "FightStartingEvent",
    "log_fight_starting",
    "GameObserver",
    "ObserverRegistry",
]
