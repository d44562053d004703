"""Tests for CLI command handlers."""

from argparse import Namespace
from unittest.mock import Mock

import pytest

from patternplayground.config.schemas import AppConfig, MazeConfig
from patternplayground.infrastructure.patterns import ProcessState
from patternplayground.infrastructure.registry import UnsupportedFamilyError
from patternplayground.domain.maze import NormalMazeFactory
from patternplayground.interface.command_handlers import (
    COMMAND_HANDLERS,
    BuildMazeCLIHandler,
    CreateMazeCLIHandler,
    ListFamiliesCLIHandler,
    ShapeBoundingBoxCLIHandler,
    ShowAlertCLIHandler,
)


@pytest.fixture
def state(family_registry):
    return ProcessState(maze_factory=NormalMazeFactory(), family_registry=family_registry)


@pytest.mark.unit
class TestMazeHandlers:
    """Test cases for maze command handlers."""

    def test_create_uses_configured_default_family(self, state):
        config = AppConfig(maze=MazeConfig(default_family="enchanted"))
        handler = CreateMazeCLIHandler(state=state, config=config)

        result = handler.handle(Namespace(family=None))

        assert result["family"] == "enchanted"
        assert result["room_count"] == 2
        assert result["rooms"][0]["kind"] == "EnchantedRoom"
        assert result["rooms"][0]["east"] == "DoorNeedingSpell"
        assert result["rendered"].startswith("=" * 27 + "\nMaze rooms:\n")

    def test_create_honours_banner_width(self, state):
        config = AppConfig(maze=MazeConfig(banner_width=4))

        result = CreateMazeCLIHandler(state=state, config=config).handle(Namespace(family="normal"))

        assert result["rendered"].startswith("====\n")

    def test_create_unknown_family(self, state, app_config):
        handler = CreateMazeCLIHandler(state=state, config=app_config)

        with pytest.raises(UnsupportedFamilyError):
            handler.handle(Namespace(family="haunted"))

    def test_build_standard(self, state, app_config):
        result = BuildMazeCLIHandler(state=state, config=app_config).handle(Namespace(builder=None))

        assert result["builder"] == "standard"
        assert result["rooms"][0]["east"] == "Door"
        assert result["rooms"][1]["west"] == "Door"

    def test_build_counting(self, state, app_config):
        result = BuildMazeCLIHandler(state=state, config=app_config).handle(
            Namespace(builder="counting")
        )

        assert result["rooms"] == 2
        assert result["doors"] == 1
        assert result["maze"] is None
        assert result["rendered"] == "The maze has\nrooms 2\ndoors 1\n"

    def test_list_families(self, state, app_config):
        result = ListFamiliesCLIHandler(state=state, config=app_config).handle(Namespace())

        assert [f["name"] for f in result["factories"]][:3] == ["normal", "enchanted", "bombed"]
        assert [b["name"] for b in result["builders"]] == ["standard", "counting"]

    def test_injected_logger_is_used(self, state, app_config):
        logger = Mock()
        handler = CreateMazeCLIHandler(state=state, config=app_config, logger=logger)

        handler.handle(Namespace(family="normal"))

        logger.debug.assert_called_once_with("Creating maze", family="normal")


@pytest.mark.unit
class TestPatternHandlers:
    """Test cases for the alert and shape handlers."""

    def test_show_alert(self, state, app_config):
        result = ShowAlertCLIHandler(state=state, config=app_config).handle(
            Namespace(alert_type="done")
        )

        assert result["view"] == "DoneAlertView"
        assert result["rendered"] == "Completion alert with a single OK button."

    def test_shape_bounding_box(self, state, app_config):
        command = Namespace(x=1.0, y=2.0, width=3.0, height=4.0, text="hi")

        result = ShapeBoundingBoxCLIHandler(state=state, config=app_config).handle(command)

        assert result["bounding_box"] == {
            "bottom_left": {"x": 1.0, "y": 2.0},
            "top_right": {"x": 4.0, "y": 6.0},
        }
        assert result["is_empty"] is False
        assert result["manipulator"] == "TextShape"

    def test_every_command_is_routed(self):
        assert set(COMMAND_HANDLERS) == {
            ("maze", "create"),
            ("maze", "build"),
            ("families", "list"),
            ("alerts", "show"),
            ("shapes", "bbox"),
        }
