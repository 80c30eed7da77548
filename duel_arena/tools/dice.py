"""Dice rolling for the duel simulation.

This module provides dice rolling functionality with support for:
- Standard dice notation (1d20, 2d6+3, etc.)
- An injectable random function so fights can be replayed in tests
- Formatted output for the fight log

Every random decision in a fight (attack damage, armor blocks, stamina cost)
goes through these helpers.
"""

import logging
import random
import re
from dataclasses import dataclass
from typing import Callable

logger = logging.getLogger(__name__)

# Type alias for random function (allows mocking in tests)
RandomFunc = Callable[[int, int], int]


@dataclass
class DiceRollResult:
    """Result of a dice roll."""

    rolls: list[int]  # Individual die results
    modifier: int  # Applied modifier
    total: int  # Final result
    purpose: str  # What the roll was for
    roller: str  # Who made the roll
    notation: str  # Original dice notation


def parse_dice_notation(notation: str) -> tuple[int, int, int]:
    """Parse dice notation into (num_dice, die_size, modifier).

    Args:
        notation: Dice notation like "1d20", "2d6+3", "1d8-1"

    Returns:
        Tuple of (number_of_dice, die_size, modifier)

    Raises:
        ValueError: If notation is invalid

    Examples:
        >>> parse_dice_notation("1d20")
        (1, 20, 0)
        >>> parse_dice_notation("1d20+25")
        (1, 20, 25)
    """
    pattern = r"^(\d+)d(\d+)([+-]\d+)?$"
    match = re.match(pattern, notation.lower().strip())

    if not match:
        raise ValueError(f"Invalid dice notation: {notation}")

    num_dice = int(match.group(1))
    die_size = int(match.group(2))
    modifier = int(match.group(3)) if match.group(3) else 0

    if num_dice < 1:
        raise ValueError(f"Number of dice must be at least 1: {notation}")
    if die_size < 1:
        raise ValueError(f"Die size must be at least 1: {notation}")

    return num_dice, die_size, modifier


def roll_single_die(die_size: int, rand_func: RandomFunc | None = None) -> int:
    """Roll a single die.

    Args:
        die_size: Number of sides on the die
        rand_func: Optional custom random function for testing

    Returns:
        The roll result (1 to die_size inclusive)
    """
    if rand_func:
        return rand_func(1, die_size)
    return random.randint(1, die_size)


def roll_dice(
    notation: str,
    purpose: str,
    roller: str,
    rand_func: RandomFunc | None = None,
) -> DiceRollResult:
    """Roll dice using dice notation.

    Args:
        notation: Dice notation (e.g., "2d12", "1d20+25")
        purpose: What the roll is for (e.g., "sword damage", "stamina cost")
        roller: Who is making the roll (e.g., "fighter")
        rand_func: Optional custom random function for testing

    Returns:
        DiceRollResult with the individual rolls and the total.

    Examples:
        >>> roll_dice("2d12", "sword damage", "fighter")
        DiceRollResult(rolls=[4, 9], modifier=0, total=13, ...)
    """
    num_dice, die_size, modifier = parse_dice_notation(notation)

    rolls = [roll_single_die(die_size, rand_func) for _ in range(num_dice)]
    total = sum(rolls) + modifier

    result = DiceRollResult(
        rolls=rolls,
        modifier=modifier,
        total=total,
        purpose=purpose,
        roller=roller,
        notation=notation,
    )

    logger.debug(f"Roll: {format_roll_result(result)}")

    return result


def roll_total(
    notation: str,
    rand_func: RandomFunc | None = None,
    purpose: str = "",
    roller: str = "",
) -> int:
    """Roll dice and return only the total."""
    return roll_dice(notation, purpose, roller, rand_func=rand_func).total


def format_roll_result(result: DiceRollResult) -> str:
    """Format roll result for the fight log.

    Examples:
        "Sword Damage for fighter: [4, 9] = 13"
        "Stamina Cost for mage: [7] + 25 = 32"
    """
    rolls = result.rolls
    modifier = result.modifier
    total = result.total
    purpose = result.purpose
    roller = result.roller

    rolls_str = "[" + ", ".join(str(r) for r in rolls) + "]"

    if modifier > 0:
        mod_str = f" + {modifier}"
    elif modifier < 0:
        mod_str = f" - {abs(modifier)}"
    else:
        mod_str = ""

    label = purpose.title() if purpose else "Roll"
    if roller:
        label = f"{label} for {roller}"

    return f"{label}: {rolls_str}{mod_str} = {total}"
