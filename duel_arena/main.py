"""Main entry point for Duel Arena.

Runs a single fight between two archetypes and prints the outcome.
"""

import argparse
import logging
import random
import sys

from duel_arena.config import Settings, get_settings
from duel_arena.events.dispatcher import EventDispatcher, FightStartingEvent, log_fight_starting
from duel_arena.game.builder import ARCHETYPES, CharacterBuilderFactory, UnknownArchetypeError
from duel_arena.game.combat import GameApplication
from duel_arena.game.models import FightResult
from duel_arena.game.xp import XpCalculator, XpEarnedObserver
from duel_arena.tools.dice import parse_dice_notation


def print_banner() -> None:
    """Print the application banner."""
    banner = """
    ========================================
     Duel Arena
     Turn-Based Fights Between Archetypes
    ========================================
    """
    print(banner)


def setup_logging(settings: Settings, verbose: bool = False) -> None:
    """Set up logging configuration."""
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def check_configuration(settings: Settings) -> bool:
    """Check that the settings and archetype presets produce playable characters.

    Returns:
        True if configuration is valid, False otherwise.
    """
    print(f"[OK] Log level: {settings.log_level}")

    try:
        parse_dice_notation(settings.stamina_cost_dice)
    except ValueError as e:
        print(f"[ERROR] Stamina cost: {e}")
        return False
    print(f"[OK] Stamina: {settings.max_stamina} (cost {settings.stamina_cost_dice} per attack)")

    seed = settings.random_seed if settings.random_seed is not None else "random"
    print(f"[OK] Random seed: {seed}")
    mode = "isolated" if settings.isolate_observer_errors else "propagated"
    print(f"[OK] Observer errors: {mode}")

    if not ARCHETYPES:
        print("[ERROR] No archetypes defined")
        return False

    factory = CharacterBuilderFactory(settings=settings)
    broken = []
    for name in ARCHETYPES:
        try:
            factory.create_from_archetype(name)
        except ValueError as e:
            broken.append(name)
            print(f"[ERROR] Archetype {name!r} can't be built: {e}")
    if broken:
        return False

    print(f"[OK] Archetypes: {', '.join(ARCHETYPES)}")
    return True


def print_fight_starting(event: FightStartingEvent) -> None:
    """Announce both fighters before the first round."""
    print(f"{event.player.name} (player) vs {event.ai.name} (ai)")
    print(
        f"  {event.player.name}: {event.player.max_health} HP, "
        f"{event.player.base_damage} base damage, level {event.player.level}"
    )
    print(
        f"  {event.ai.name}: {event.ai.max_health} HP, "
        f"{event.ai.base_damage} base damage, level {event.ai.level}"
    )


def format_fight_summary(result: FightResult, xp_earned: int | None = None) -> str:
    """Build the text printed after a fight."""
    lines = [
        "=== FIGHT OVER ===",
        "",
        f"Winner: {result.winner.name} ({result.winner.get_current_health()} HP left)",
        f"Loser: {result.loser.name}",
        f"Rounds: {result.rounds}",
        f"Damage dealt: {result.damage_dealt}",
        f"Damage received: {result.damage_received}",
        f"Exhausted turns: {result.exhausted_turns}",
    ]
    if xp_earned is not None:
        lines.append(
            f"XP earned by {result.winner.name}: {xp_earned} "
            f"(level {result.winner.level}, {result.winner.xp} XP)"
        )
    return "\n".join(lines)


def build_game(settings: Settings, seed: int | None = None) -> GameApplication:
    """Wire the game with a dispatcher and an optional seeded random function."""
    rand_func = random.Random(seed).randint if seed is not None else None

    dispatcher = EventDispatcher()
    dispatcher.add_listener(FightStartingEvent, log_fight_starting)
    dispatcher.add_listener(FightStartingEvent, print_fight_starting)

    factory = CharacterBuilderFactory(settings=settings, rand_func=rand_func)
    return GameApplication(factory, dispatcher, settings=settings)


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Duel Arena - Turn-Based Fight Simulator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m duel_arena.main --list                       # List archetypes
  python -m duel_arena.main --player mage                # Mage vs a random AI
  python -m duel_arena.main --player archer --ai fighter # Pick both sides
  python -m duel_arena.main --seed 42                    # Reproducible fight
        """,
    )

    parser.add_argument(
        "--check",
        action="store_true",
        help="Check configuration and exit",
    )

    parser.add_argument(
        "--list",
        action="store_true",
        help="List the available archetypes and exit",
    )

    parser.add_argument(
        "--player",
        default="fighter",
        help="Archetype for the player (default: fighter)",
    )

    parser.add_argument(
        "--ai",
        help="Archetype for the AI (default: random)",
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Seed the dice for a reproducible fight",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show every round and roll",
    )

    args = parser.parse_args()

    settings = get_settings()
    setup_logging(settings, verbose=args.verbose)

    print_banner()

    if args.check:
        success = check_configuration(settings)
        sys.exit(0 if success else 1)

    seed = args.seed if args.seed is not None else settings.random_seed
    game = build_game(settings, seed=seed)

    if args.list:
        for name in game.get_characters_list():
            print(f"  - {name}")
        sys.exit(0)

    ai_name = args.ai or random.Random(seed).choice(game.get_characters_list())

    try:
        player = game.create_character(args.player)
        ai = game.create_character(ai_name)
    except UnknownArchetypeError as e:
        print(f"[ERROR] {e}")
        print(f"  Choose one of: {', '.join(game.get_characters_list())}")
        sys.exit(1)

    xp_observer = XpEarnedObserver(XpCalculator(settings))
    game.subscribe(xp_observer)

    result = game.play(player, ai)
    print()
    print(format_fight_summary(result, xp_observer.last_xp_earned))


if __name__ == "__main__":
    main()
