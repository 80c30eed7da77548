"""Fight resolution for one player against one AI.

GameApplication runs the round loop:
- The player rests once before the fight (the AI does not)
- The player attacks, then the AI's health is checked
- The AI counter-attacks, then the player's health is checked

A lethal player attack ends the fight before the AI gets its counter-attack,
so both sides can never die in the same round.
"""

from __future__ import annotations

import logging

from duel_arena.config import Settings, get_settings
from duel_arena.events.dispatcher import EventDispatcher, FightStartingEvent
from duel_arena.events.observers import GameObserver, ObserverRegistry
from duel_arena.game.builder import ARCHETYPES, CharacterBuilderFactory
from duel_arena.game.models import Character, Combatant, FightResult

logger = logging.getLogger(__name__)


class GameApplication:
    """Runs fights and tells observers how they ended.

    Example:
        >>> game = GameApplication(CharacterBuilderFactory(), EventDispatcher())
        >>> result = game.play(game.create_character("fighter"), game.create_character("mage"))
        >>> result.winner is not result.loser
        True
    """

    def __init__(
        self,
        character_builder_factory: CharacterBuilderFactory,
        event_dispatcher: EventDispatcher,
        settings: Settings | None = None,
    ):
        settings = settings or get_settings()
        self.character_builder_factory = character_builder_factory
        self.event_dispatcher = event_dispatcher
        self.observers = ObserverRegistry(isolate_errors=settings.isolate_observer_errors)

    def play(self, player: Combatant, ai: Combatant) -> FightResult:
        """Fight until one side's health drops to 0 or below.

        Args:
            player: The player's character; rested before the first round
            ai: The opposing character

        Returns:
            FightResult with winner and loser set
        """
        self.event_dispatcher.dispatch(FightStartingEvent(player=player, ai=ai))
        player.rest()

        result = FightResult()
        while True:
            result.add_round()

            damage = player.attack()
            if damage == 0:
                result.add_exhausted_turn()

            damage_dealt = ai.receive_attack(damage)
            result.add_damage_dealt(damage_dealt)
            logger.debug(
                f"Round {result.rounds}: player dealt {damage_dealt}, "
                f"ai health {ai.get_current_health()}"
            )

            if self._did_die(ai):
                return self._finish_fight(result, winner=player, loser=ai)

            damage_received = player.receive_attack(ai.attack())
            result.add_damage_received(damage_received)
            logger.debug(
                f"Round {result.rounds}: ai dealt {damage_received}, "
                f"player health {player.get_current_health()}"
            )

            if self._did_die(player):
                return self._finish_fight(result, winner=ai, loser=player)

    def create_character(self, name: str) -> Character:
        """Build a character from an archetype name (case-insensitive).

        Raises:
            UnknownArchetypeError: If the archetype doesn't exist
        """
        return self.character_builder_factory.create_from_archetype(name)

    def get_characters_list(self) -> list[str]:
        """Archetype names in display order."""
        return list(ARCHETYPES)

    def subscribe(self, observer: GameObserver) -> int:
        """Subscribe an observer and return its registration token."""
        return self.observers.subscribe(observer)

    def unsubscribe(self, observer: GameObserver) -> None:
        self.observers.unsubscribe(observer)

    def _finish_fight(
        self, result: FightResult, winner: Combatant, loser: Combatant
    ) -> FightResult:
        result.finish(winner=winner, loser=loser)
        logger.info(
            f"Fight finished after {result.rounds} round(s): "
            f"{_describe(winner)} beat {_describe(loser)}"
        )
        self.observers.notify(result)
        return result

    @staticmethod
    def _did_die(combatant: Combatant) -> bool:
        return combatant.get_current_health() <= 0


def _describe(combatant: Combatant) -> str:
    return getattr(combatant, "name", type(combatant).__name__)
