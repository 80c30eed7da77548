"""Tests for the character builder and archetype presets."""

import pytest

from duel_arena.config import Settings
from duel_arena.game.builder import (
    ARCHETYPES,
    CharacterBuilder,
    CharacterBuilderFactory,
    UnknownArchetypeError,
    get_archetype,
)
from duel_arena.game.types import ArmorType, AttackType
from duel_arena.testing import lowest_roll


class TestArchetypes:
    """Tests for the preset table."""

    @pytest.mark.parametrize(
        "name, max_health, base_damage, attack_types, armor_type",
        [
            ("fighter", 90, 12, (AttackType.SWORD,), ArmorType.SHIELD),
            ("archer", 80, 10, (AttackType.BOW,), ArmorType.LEATHER_ARMOR),
            ("mage", 70, 8, (AttackType.FIRE_BOLT,), ArmorType.ICE_BLOCK),
            ("mage_archer", 75, 9, (AttackType.FIRE_BOLT,), ArmorType.SHIELD),
        ],
    )
    def test_preset_values(self, name, max_health, base_damage, attack_types, armor_type):
        """Every archetype has its fixed stats."""
        preset = ARCHETYPES[name]
        assert preset.max_health == max_health
        assert preset.base_damage == base_damage
        assert preset.attack_types == attack_types
        assert preset.armor_type is armor_type

    def test_mage_archer_bow_disabled(self):
        """mage_archer only uses fire bolt for now."""
        assert AttackType.BOW not in ARCHETYPES["mage_archer"].attack_types

    def test_table_is_read_only(self):
        """The preset table can't be modified."""
        with pytest.raises(TypeError):
            ARCHETYPES["wizard"] = ARCHETYPES["mage"]

    def test_lookup_is_case_insensitive(self):
        """Names are matched ignoring case and surrounding spaces."""
        assert get_archetype(" Mage_Archer ") is ARCHETYPES["mage_archer"]

    def test_unknown_archetype(self):
        """Unknown names raise UnknownArchetypeError."""
        with pytest.raises(UnknownArchetypeError, match="Undefined character: wizard") as exc_info:
            get_archetype("wizard")
        assert exc_info.value.name == "wizard"
        assert isinstance(exc_info.value, ValueError)


class TestCharacterBuilder:
    """Tests for CharacterBuilder."""

    def test_build_character(self, settings):
        """Builder assembles a validated character."""
        character = (
            CharacterBuilder(settings=settings)
            .set_name("custom")
            .set_max_health(50)
            .set_base_damage(5)
            .set_attack_type("sword", "bow")
            .set_armor_type("ice_block")
            .build_character()
        )
        assert character.name == "custom"
        assert character.max_health == 50
        assert character.get_current_health() == 50
        assert character.attack_types == [AttackType.SWORD, AttackType.BOW]
        assert character.armor_type is ArmorType.ICE_BLOCK

    def test_missing_stats(self, settings):
        """Building without required stats fails."""
        builder = CharacterBuilder(settings=settings).set_max_health(50)
        with pytest.raises(ValueError, match="missing: base_damage, armor_type, attack_type"):
            builder.build_character()

    def test_unknown_attack_tag(self, settings):
        """Unknown attack tags fail when set."""
        with pytest.raises(ValueError):
            CharacterBuilder(settings=settings).set_attack_type("axe")

    def test_unknown_armor_tag(self, settings):
        """Unknown armor tags fail when set."""
        with pytest.raises(ValueError):
            CharacterBuilder(settings=settings).set_armor_type("plate")

    def test_stamina_from_settings(self):
        """Stamina settings flow into the character."""
        settings = Settings(_env_file=None, max_stamina=50, stamina_cost_dice="1d4+1")
        character = CharacterBuilderFactory(settings=settings).create_from_archetype("archer")
        assert character.max_stamina == 50
        assert character.current_stamina == 50
        assert character.stamina_cost_dice == "1d4+1"


class TestCharacterBuilderFactory:
    """Tests for CharacterBuilderFactory."""

    def test_create_builder_returns_new_builder(self, factory):
        """Each call gives a fresh builder."""
        assert factory.create_builder() is not factory.create_builder()

    def test_create_from_archetype_mixed_case(self, factory):
        """FIGHTER builds a fighter."""
        character = factory.create_from_archetype("FIGHTER")
        assert character.name == "fighter"
        assert character.max_health == 90
        assert character.base_damage == 12
        assert character.attack_types == [AttackType.SWORD]
        assert character.armor_type is ArmorType.SHIELD

    def test_characters_are_independent(self, factory):
        """Two characters from the same preset don't share state."""
        first = factory.create_from_archetype("mage")
        second = factory.create_from_archetype("mage")
        first.receive_attack(50)
        assert first is not second
        assert second.get_current_health() == 70

    def test_rand_func_passed_to_character(self, settings):
        """Characters roll with the factory's random function."""
        factory = CharacterBuilderFactory(settings=settings, rand_func=lowest_roll)
        fighter = factory.create_from_archetype("fighter")
        assert fighter.attack() == 14

    def test_unknown_archetype(self, factory):
        """Unknown archetypes propagate UnknownArchetypeError."""
        with pytest.raises(UnknownArchetypeError):
            factory.create_from_archetype("wizard")
