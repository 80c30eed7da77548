"""Pytest configuration and shared fixtures."""

import os
from unittest.mock import patch

import pytest

from duel_arena.config import Settings, get_settings
from duel_arena.game.builder import CharacterBuilderFactory
from duel_arena.game.combat import GameApplication
from duel_arena.testing import RecordingDispatcher, lowest_roll


@pytest.fixture(autouse=True)
def clean_settings_cache():
    """Clear settings cache before each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def mock_env_empty():
    """Fixture that clears all environment variables."""
    with patch.dict(os.environ, {}, clear=True):
        yield


@pytest.fixture
def settings():
    """Default settings, ignoring the environment and any .env file."""
    with patch.dict(os.environ, {}, clear=True):
        return Settings(_env_file=None)


@pytest.fixture
def factory(settings):
    """Builder factory whose dice always roll 1."""
    return CharacterBuilderFactory(settings=settings, rand_func=lowest_roll)


@pytest.fixture
def dispatcher():
    """Dispatcher that records every event."""
    return RecordingDispatcher()


@pytest.fixture
def game(factory, dispatcher, settings):
    """GameApplication wired with the deterministic factory."""
    return GameApplication(factory, dispatcher, settings=settings)
