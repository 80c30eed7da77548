"""Attack and armor types.

Each member carries its own damage or mitigation rule, so an unknown tag
fails when the enum is looked up rather than in the middle of a fight.
"""

from __future__ import annotations

import math
from enum import Enum

from duel_arena.tools.dice import RandomFunc, roll_single_die, roll_total

# d100 roll a bow must beat for a critical hit
BOW_CRITICAL_THRESHOLD = 70
BOW_CRITICAL_MULTIPLIER = 3

# d100 roll a shield must beat to block a hit completely
SHIELD_BLOCK_THRESHOLD = 80

LEATHER_ARMOR_REDUCTION = 0.25


class AttackType(str, Enum):
    """Ways a character can deal damage."""

    SWORD = "sword"
    BOW = "bow"
    FIRE_BOLT = "fire_bolt"

    def perform_attack(
        self,
        base_damage: int,
        rand_func: RandomFunc | None = None,
        roller: str = "",
    ) -> int:
        """Roll the damage of one attack of this type.

        Args:
            base_damage: The attacker's base damage
            rand_func: Optional custom random function for testing
            roller: Name used in the roll log

        Returns:
            Damage before the defender's armor is applied
        """
        if self is AttackType.SWORD:
            return base_damage + roll_total("2d12", rand_func, "sword damage", roller)

        if self is AttackType.BOW:
            critical_chance = roll_total("1d100", rand_func, "bow critical", roller)
            if critical_chance > BOW_CRITICAL_THRESHOLD:
                return base_damage * BOW_CRITICAL_MULTIPLIER
            return base_damage

        # Fire bolt ignores the caster's base damage
        return roll_total("3d10", rand_func, "fire bolt damage", roller)


class ArmorType(str, Enum):
    """Ways a character can soak incoming damage."""

    SHIELD = "shield"
    LEATHER_ARMOR = "leather_armor"
    ICE_BLOCK = "ice_block"

    def armor_reduction(
        self,
        damage: int,
        rand_func: RandomFunc | None = None,
        roller: str = "",
    ) -> int:
        """Roll how much of ``damage`` this armor absorbs.

        The result may exceed ``damage``; callers clamp the applied damage at 0.
        """
        if self is ArmorType.SHIELD:
            block_chance = roll_total("1d100", rand_func, "shield block", roller)
            return damage if block_chance > SHIELD_BLOCK_THRESHOLD else 0

        if self is ArmorType.LEATHER_ARMOR:
            return math.floor(damage * LEATHER_ARMOR_REDUCTION)

        return roll_total("2d8", rand_func, "ice block", roller)


def perform_multi_attack(
    attack_types: list[AttackType],
    base_damage: int,
    rand_func: RandomFunc | None = None,
    roller: str = "",
) -> int:
    """Pick one of several attack types at random and attack with it."""
    if len(attack_types) == 1:
        return attack_types[0].perform_attack(base_damage, rand_func, roller)

    chosen = attack_types[roll_single_die(len(attack_types), rand_func) - 1]
    return chosen.perform_attack(base_damage, rand_func, roller)
