"""Fight mechanics: characters, presets, the fight loop and XP."""

from duel_arena.game.builder import (
    ARCHETYPES,
    ArchetypePreset,
    CharacterBuilder,
    CharacterBuilderFactory,
    UnknownArchetypeError,
    get_archetype,
)
from duel_arena.game.combat import GameApplication
from duel_arena.game.models import Character, Combatant, FightResult
from duel_arena.game.types import ArmorType, AttackType, perform_multi_attack
from duel_arena.game.xp import XpCalculator, XpEarnedObserver

__all__ = [
    # Builder
    "ARCHETYPES",
    "ArchetypePreset",
    "CharacterBuilder",
    "CharacterBuilderFactory",
    "UnknownArchetypeError",
    "get_archetype",
    # Combat
    "GameApplication",
    # Models
    "Character",
    "Combatant",
    "FightResult",
    # Types
    "ArmorType",
    "AttackType",
    "perform_multi_attack",
    # XP
    "XpCalculator",
    "XpEarnedObserver",
]
