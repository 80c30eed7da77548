"""Shared tools for the duel simulation."""

from duel_arena.tools.dice import (
    DiceRollResult,
    RandomFunc,
    format_roll_result,
    parse_dice_notation,
    roll_dice,
    roll_single_die,
    roll_total,
)

__all__ = [
    "DiceRollResult",
    "RandomFunc",
    "format_roll_result",
    "parse_dice_notation",
    "roll_dice",
    "roll_single_die",
    "roll_total",
]
