"""Tests for main module."""

import sys
from types import MappingProxyType
from unittest.mock import patch

import pytest

from duel_arena.config import Settings
from duel_arena.game.builder import ARCHETYPES, ArchetypePreset
from duel_arena.game.models import FightResult
from duel_arena.game.types import ArmorType, AttackType
from duel_arena.main import build_game, check_configuration, format_fight_summary, main


class TestMainList:
    """Tests for --list."""

    def test_list_prints_archetypes(self, mock_env_empty, capsys):
        """--list prints every archetype and exits 0."""
        with (
            patch.object(sys, "argv", ["main", "--list"]),
            pytest.raises(SystemExit) as exc_info,
        ):
            main()

        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        for name in ("fighter", "mage", "archer", "mage_archer"):
            assert f"  - {name}" in captured.out


class TestMainCheck:
    """Tests for --check."""

    def test_check_prints_settings(self, mock_env_empty, capsys):
        """--check prints the configuration and exits 0."""
        with (
            patch.object(sys, "argv", ["main", "--check"]),
            pytest.raises(SystemExit) as exc_info,
        ):
            main()

        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert "[OK] Stamina: 100 (cost 1d20+25 per attack)" in captured.out
        assert "[OK] Observer errors: propagated" in captured.out
        assert "[OK] Archetypes: fighter, mage, archer, mage_archer" in captured.out

    def test_check_fails_without_archetypes(self, settings, capsys):
        """An empty archetype table fails the check."""
        with patch("duel_arena.main.ARCHETYPES", MappingProxyType({})):
            assert check_configuration(settings) is False

        assert "[ERROR] No archetypes defined" in capsys.readouterr().out

    def test_check_exits_1_on_unbuildable_archetype(self, mock_env_empty, capsys):
        """A preset that can't build a Character makes --check exit 1."""
        broken = MappingProxyType(
            {
                **ARCHETYPES,
                "ghost": ArchetypePreset(
                    max_health=0,
                    base_damage=5,
                    attack_types=(AttackType.SWORD,),
                    armor_type=ArmorType.SHIELD,
                ),
            }
        )
        with (
            patch("duel_arena.main.ARCHETYPES", broken),
            patch("duel_arena.game.builder.ARCHETYPES", broken),
            patch.object(sys, "argv", ["main", "--check"]),
            pytest.raises(SystemExit) as exc_info,
        ):
            main()

        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert "[ERROR] Archetype 'ghost' can't be built" in captured.out
        assert "[OK] Archetypes" not in captured.out


class TestMainFight:
    """Tests for running a fight from the CLI."""

    def test_unknown_player_exits_with_error(self, mock_env_empty, capsys):
        """An unknown archetype prints an error and exits 1."""
        with (
            patch.object(sys, "argv", ["main", "--player", "wizard", "--ai", "mage"]),
            pytest.raises(SystemExit) as exc_info,
        ):
            main()

        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert "[ERROR] Undefined character: wizard" in captured.out

    def test_seeded_fight_prints_summary(self, mock_env_empty, capsys):
        """A fight runs to the end and prints the summary."""
        with patch.object(sys, "argv", ["main", "--player", "Mage", "--ai", "archer", "--seed", "7"]):
            main()

        captured = capsys.readouterr()
        assert "mage (player) vs archer (ai)" in captured.out
        assert "=== FIGHT OVER ===" in captured.out
        assert "XP earned by" in captured.out

    def test_seeded_fights_repeat(self, mock_env_empty, capsys):
        """The same seed gives the same fight."""
        argv = ["main", "--player", "fighter", "--seed", "3"]
        with patch.object(sys, "argv", argv):
            main()
        first = capsys.readouterr().out
        with patch.object(sys, "argv", argv):
            main()
        second = capsys.readouterr().out

        assert first == second


class TestFormatFightSummary:
    """Tests for format_fight_summary."""

    def test_summary_lines(self):
        """The summary lists the outcome and counters."""
        game = build_game(Settings(_env_file=None), seed=1)
        winner = game.create_character("fighter")
        loser = game.create_character("mage")
        result = FightResult(rounds=3, damage_dealt=40, damage_received=12, exhausted_turns=1)
        result.finish(winner=winner, loser=loser)

        summary = format_fight_summary(result, xp_earned=30)

        assert "Winner: fighter (90 HP left)" in summary
        assert "Loser: mage" in summary
        assert "Rounds: 3" in summary
        assert "Exhausted turns: 1" in summary
        assert "XP earned by fighter: 30 (level 1, 0 XP)" in summary
