"""Models for fighters and fight outcomes.

Characters are pydantic models so presets and CLI input are validated when a
character is built. FightResult is a plain accumulator filled in by the
fight loop.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, Field, PrivateAttr

from duel_arena.game.types import ArmorType, AttackType, perform_multi_attack
from duel_arena.tools.dice import RandomFunc, roll_total

logger = logging.getLogger(__name__)

LEVEL_UP_MULTIPLIER = 1.15


@runtime_checkable
class Combatant(Protocol):
    """What the fight loop needs from each side."""

    def attack(self) -> int: ...

    def receive_attack(self, damage: int) -> int: ...

    def rest(self) -> None: ...

    def get_current_health(self) -> int: ...


class Character(BaseModel):
    """A fighter built from an archetype preset."""

    name: str = Field(default="character", description="Archetype or display name")
    max_health: int = Field(gt=0, description="Health restored by rest()")
    base_damage: int = Field(ge=0, description="Damage before attack type bonuses")
    attack_types: list[AttackType] = Field(
        min_length=1, description="Attack types; one is picked per attack when several"
    )
    armor_type: ArmorType = Field(description="Armor applied to incoming attacks")
    current_health: int | None = Field(
        default=None, description="Current health, defaults to max_health"
    )
    max_stamina: int = Field(default=100, gt=0)
    current_stamina: int | None = Field(
        default=None, description="Current stamina, defaults to max_stamina"
    )
    stamina_cost_dice: str = Field(default="1d20+25", description="Stamina spent per attack")
    level: int = Field(default=1, ge=1)
    xp: int = Field(default=0, ge=0)

    _rand_func: RandomFunc | None = PrivateAttr(default=None)

    def model_post_init(self, __context: Any) -> None:
        if self.current_health is None:
            self.current_health = self.max_health
        if self.current_stamina is None:
            self.current_stamina = self.max_stamina

    def set_rand_func(self, rand_func: RandomFunc | None) -> None:
        """Use a custom random function for every roll this character makes."""
        self._rand_func = rand_func

    @property
    def is_alive(self) -> bool:
        """Check if character is alive (health > 0)."""
        return self.get_current_health() > 0

    def get_current_health(self) -> int:
        return self.current_health

    def attack(self) -> int:
        """Spend stamina and roll damage.

        Returns 0 when the character runs out of stamina; stamina is then
        refilled for the next turn.
        """
        self.current_stamina -= roll_total(
            self.stamina_cost_dice, self._rand_func, "stamina cost", self.name
        )
        if self.current_stamina <= 0:
            logger.debug(f"{self.name} is exhausted and skips the attack")
            self.current_stamina = self.max_stamina
            return 0

        return perform_multi_attack(
            self.attack_types, self.base_damage, self._rand_func, self.name
        )

    def receive_attack(self, damage: int) -> int:
        """Apply armor to ``damage`` and subtract the rest from health.

        Returns:
            The damage actually taken (never negative)
        """
        reduction = self.armor_type.armor_reduction(damage, self._rand_func, self.name)
        damage_taken = max(damage - reduction, 0)
        self.current_health -= damage_taken
        return damage_taken

    def rest(self) -> None:
        """Restore health and stamina to their maximum."""
        self.current_health = self.max_health
        self.current_stamina = self.max_stamina

    def level_up(self) -> None:
        """Raise level and scale max health and base damage."""
        self.level += 1
        self.max_health = math.floor(self.max_health * LEVEL_UP_MULTIPLIER)
        self.base_damage = math.floor(self.base_damage * LEVEL_UP_MULTIPLIER)
        logger.info(
            f"{self.name} reached level {self.level} "
            f"(max health {self.max_health}, base damage {self.base_damage})"
        )


@dataclass
class FightResult:
    """Accumulated outcome of one fight."""

    rounds: int = 0
    damage_dealt: int = 0  # Damage the player landed on the AI
    damage_received: int = 0  # Damage the AI landed on the player
    exhausted_turns: int = 0  # Player attacks that dealt 0
    winner: Combatant | None = None
    loser: Combatant | None = None

    @property
    def is_finished(self) -> bool:
        return self.winner is not None

    def add_round(self) -> None:
        self.rounds += 1

    def add_damage_dealt(self, damage: int) -> None:
        self.damage_dealt += damage

    def add_damage_received(self, damage: int) -> None:
        self.damage_received += damage

    def add_exhausted_turn(self) -> None:
        self.exhausted_turns += 1

    def finish(self, winner: Combatant, loser: Combatant) -> None:
        """Record the winner and loser.

        Raises:
            ValueError: If the fight already has an outcome or winner is loser
        """
        if self.is_finished:
            raise ValueError("Fight result already has a winner")
        if winner is loser:
            raise ValueError("Winner and loser must be different combatants")
        self.winner = winner
        self.loser = loser
