import os
import pytest
from unittest.mock import patch

from patternplayground.application.maze.service import MazeGame
from patternplayground.config.schemas import AppConfig, LoggingConfig
from patternplayground.domain.maze import (
    BombedMazeFactory,
    EnchantedMazeFactory,
    NormalMazeFactory,
    Spell,
    StandardMazeBuilder,
)
from patternplayground.infrastructure.logging.logger import setup_logging
from patternplayground.infrastructure.registry import FamilyRegistry, register_builtin_families

# Configure structlog before anything emits registry debug records
setup_logging(LoggingConfig(level="WARNING"))


@pytest.fixture(autouse=True)
def clean_playground_env():
    """Hide PLAYGROUND_* variables from the developer's shell."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("PLAYGROUND_")}
    with patch.dict(os.environ, env, clear=True):
        yield


@pytest.fixture
def maze_game():
    return MazeGame()


@pytest.fixture
def normal_factory():
    return NormalMazeFactory()


@pytest.fixture
def enchanted_factory():
    return EnchantedMazeFactory(spell=Spell(words="open sesame"))


@pytest.fixture
def bombed_factory():
    return BombedMazeFactory()


@pytest.fixture
def standard_builder():
    return StandardMazeBuilder()


@pytest.fixture
def family_registry():
    """Fresh registry populated with the built-in families."""
    return register_builtin_families(FamilyRegistry())


@pytest.fixture
def app_config():
    return AppConfig()
