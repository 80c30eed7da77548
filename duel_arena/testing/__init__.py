"""Testing utilities for Duel Arena.

This package provides:
- ScriptedCombatant: Combatant with fixed attack values for deterministic fights
- RecordingObserver: Observer that records fight results
- RecordingDispatcher: EventDispatcher that records dispatched events
- fixed_rolls / lowest_roll / highest_roll: Random functions for dice
"""

from duel_arena.testing.fakes import (
    RecordingDispatcher,
    RecordingObserver,
    ScriptedCombatant,
    fixed_rolls,
    highest_roll,
    lowest_roll,
)

__all__ = [
    "RecordingDispatcher",
    "RecordingObserver",
    "ScriptedCombatant",
    "fixed_rolls",
    "highest_roll",
    "lowest_roll",
]
