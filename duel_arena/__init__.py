"""Duel Arena: turn-based fights between character archetypes."""
