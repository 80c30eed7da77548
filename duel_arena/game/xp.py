"""Experience awarded to the winner of a fight."""

from __future__ import annotations

import logging

from duel_arena.config import Settings, get_settings
from duel_arena.game.models import Character, FightResult

logger = logging.getLogger(__name__)


class XpCalculator:
    """Adds XP to a winner and levels it up when a threshold is crossed."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

    def calculate_xp_earned(self, winner_level: int, loser_level: int) -> int:
        """XP for beating an enemy of ``loser_level``.

        Beating a higher level enemy earns a bonus per level of difference;
        beating an equal or lower level enemy earns the base award.
        """
        level_difference = loser_level - winner_level
        if level_difference > 0:
            return (
                self.settings.xp_base_award
                + level_difference * self.settings.xp_level_difference_bonus
            )
        return self.settings.xp_base_award

    def add_xp(self, winner: Character, enemy_level: int) -> int:
        """Award XP to ``winner``, levelling up as many times as it affords.

        Returns:
            The XP earned from this fight
        """
        earned = self.calculate_xp_earned(winner.level, enemy_level)
        total = winner.xp + earned

        while total >= self.settings.xp_for_next_level(winner.level):
            total -= self.settings.xp_for_next_level(winner.level)
            winner.level_up()

        winner.xp = total
        logger.info(f"{winner.name} earned {earned} XP (level {winner.level}, {winner.xp} XP)")
        return earned


class XpEarnedObserver:
    """Observer that awards XP to every fight winner."""

    def __init__(self, xp_calculator: XpCalculator):
        self.xp_calculator = xp_calculator
        self.last_xp_earned: int | None = None

    def on_fight_finished(self, result: FightResult) -> None:
        if not isinstance(result.winner, Character):
            logger.debug("Winner is not a Character, skipping XP award")
            self.last_xp_earned = None
            return

        loser_level = getattr(result.loser, "level", 1)
        self.last_xp_earned = self.xp_calculator.add_xp(result.winner, loser_level)
