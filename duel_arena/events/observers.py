"""Fight observers and their registry.

Observers are notified once per fight, after the winner and loser are set.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from duel_arena.game.models import FightResult

logger = logging.getLogger(__name__)


@runtime_checkable
class GameObserver(Protocol):
    """Anything that wants to hear about finished fights."""

    def on_fight_finished(self, result: FightResult) -> None: ...


class ObserverRegistry:
    """Ordered set of observers keyed by identity.

    Two observers that compare equal are still distinct subscribers; the same
    object subscribed twice is stored once. The registry keeps a reference to
    each observer, so the ``id()`` used as its key stays valid while subscribed.
    """

    def __init__(self, isolate_errors: bool = False):
        """Initialize the registry.

        Args:
            isolate_errors: If True, an observer that raises is logged and the
                remaining observers are still notified. If False the exception
                propagates and later observers are skipped.
        """
        self.isolate_errors = isolate_errors
        self._observers: dict[int, GameObserver] = {}

    def __len__(self) -> int:
        return len(self._observers)

    def __contains__(self, observer: object) -> bool:
        return id(observer) in self._observers

    @property
    def observers(self) -> list[GameObserver]:
        """Subscribed observers in subscription order."""
        return list(self._observers.values())

    def subscribe(self, observer: GameObserver) -> int:
        """Add an observer. Subscribing twice is a no-op.

        Returns:
            The registration token (the observer's identity key)
        """
        token = id(observer)
        if token not in self._observers:
            self._observers[token] = observer
            logger.debug(f"Subscribed observer {observer!r}")
        return token

    def unsubscribe(self, observer: GameObserver) -> None:
        """Remove an observer. Unknown observers are ignored."""
        if self._observers.pop(id(observer), None) is not None:
            logger.debug(f"Unsubscribed observer {observer!r}")

    def notify(self, result: FightResult) -> None:
        """Call ``on_fight_finished`` on every observer in subscription order."""
        for observer in self.observers:
            if not self.isolate_errors:
                observer.on_fight_finished(result)
                continue
            try:
                observer.on_fight_finished(result)
            except Exception:
                logger.exception(f"Observer {observer!r} failed handling fight result")
