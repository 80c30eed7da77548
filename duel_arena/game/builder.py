"""Character builder and archetype presets.

The builder collects stats step by step and validates them when the
Character is built. Presets are static: four archetypes, looked up by
case-insensitive name.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType

from duel_arena.config import Settings, get_settings
from duel_arena.game.models import Character
from duel_arena.game.types import ArmorType, AttackType
from duel_arena.tools.dice import RandomFunc

logger = logging.getLogger(__name__)


class UnknownArchetypeError(ValueError):
    """Raised when a character is requested for an archetype that doesn't exist."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Undefined character: {name}")


@dataclass(frozen=True)
class ArchetypePreset:
    """Starting stats for an archetype."""

    max_health: int
    base_damage: int
    attack_types: tuple[AttackType, ...]
    armor_type: ArmorType


ARCHETYPES: MappingProxyType[str, ArchetypePreset] = MappingProxyType(
    {
        "fighter": ArchetypePreset(
            max_health=90,
            base_damage=12,
            attack_types=(AttackType.SWORD,),
            armor_type=ArmorType.SHIELD,
        ),
        "mage": ArchetypePreset(
            max_health=70,
            base_damage=8,
            attack_types=(AttackType.FIRE_BOLT,),
            armor_type=ArmorType.ICE_BLOCK,
        ),
        "archer": ArchetypePreset(
            max_health=80,
            base_damage=10,
            attack_types=(AttackType.BOW,),
            armor_type=ArmorType.LEATHER_ARMOR,
        ),
        # Bow is disabled for mage_archer until it is rebalanced
        "mage_archer": ArchetypePreset(
            max_health=75,
            base_damage=9,
            attack_types=(AttackType.FIRE_BOLT,),
            armor_type=ArmorType.SHIELD,
        ),
    }
)


def get_archetype(name: str) -> ArchetypePreset:
    """Look up a preset by case-insensitive name.

    Raises:
        UnknownArchetypeError: If no preset has that name
    """
    preset = ARCHETYPES.get(name.strip().lower())
    if preset is None:
        raise UnknownArchetypeError(name)
    return preset


class CharacterBuilder:
    """Fluent builder for Character.

    Example:
        >>> character = (
        ...     CharacterBuilder()
        ...     .set_max_health(90)
        ...     .set_base_damage(12)
        ...     .set_attack_type("sword")
        ...     .set_armor_type("shield")
        ...     .build_character()
        ... )
    """

    def __init__(self, settings: Settings | None = None, rand_func: RandomFunc | None = None):
        self._settings = settings or get_settings()
        self._rand_func = rand_func
        self._name = "character"
        self._max_health: int | None = None
        self._base_damage: int | None = None
        self._attack_types: list[AttackType] = []
        self._armor_type: ArmorType | None = None

    def set_name(self, name: str) -> CharacterBuilder:
        self._name = name
        return self

    def set_max_health(self, max_health: int) -> CharacterBuilder:
        self._max_health = max_health
        return self

    def set_base_damage(self, base_damage: int) -> CharacterBuilder:
        self._base_damage = base_damage
        return self

    def set_attack_type(self, *attack_types: str | AttackType) -> CharacterBuilder:
        """Set one or more attack types; unknown tags raise ValueError."""
        self._attack_types = [AttackType(tag) for tag in attack_types]
        return self

    def set_armor_type(self, armor_type: str | ArmorType) -> CharacterBuilder:
        """Set the armor type; an unknown tag raises ValueError."""
        self._armor_type = ArmorType(armor_type)
        return self

    def build_character(self) -> Character:
        """Build the character.

        Raises:
            ValueError: If a required stat was never set
        """
        missing = [
            label
            for label, value in (
                ("max_health", self._max_health),
                ("base_damage", self._base_damage),
                ("armor_type", self._armor_type),
            )
            if value is None
        ]
        if not self._attack_types:
            missing.append("attack_type")
        if missing:
            raise ValueError(f"Cannot build character, missing: {', '.join(missing)}")

        logger.info(
            f"Creating character {self._name}: max_health={self._max_health}, "
            f"base_damage={self._base_damage}"
        )

        character = Character(
            name=self._name,
            max_health=self._max_health,
            base_damage=self._base_damage,
            attack_types=list(self._attack_types),
            armor_type=self._armor_type,
            max_stamina=self._settings.max_stamina,
            stamina_cost_dice=self._settings.stamina_cost_dice,
        )
        character.set_rand_func(self._rand_func)
        return character


class CharacterBuilderFactory:
    """Creates builders that share settings and a random function."""

    def __init__(self, settings: Settings | None = None, rand_func: RandomFunc | None = None):
        self.settings = settings
        self.rand_func = rand_func

    def create_builder(self) -> CharacterBuilder:
        return CharacterBuilder(settings=self.settings, rand_func=self.rand_func)

    def create_from_archetype(self, name: str) -> Character:
        """Build a character from a preset.

        Raises:
            UnknownArchetypeError: If no preset has that name
        """
        preset = get_archetype(name)
        return (
            self.create_builder()
            .set_name(name.strip().lower())
            .set_max_health(preset.max_health)
            .set_base_damage(preset.base_damage)
            .set_attack_type(*preset.attack_types)
            .set_armor_type(preset.armor_type)
            .build_character()
        )
