"""Maze-related command handlers for the interface layer."""
from typing import Any, Dict

from patternplayground.application.maze.service import MazeGame
from patternplayground.domain.maze.builders import CountingMazeBuilder
from patternplayground.interface.base_handler import CLICommandHandler


class CreateMazeCLIHandler(CLICommandHandler):
    """Handler for ``maze create``: assembles the maze through a factory family."""

    def handle(self, command) -> Dict[str, Any]:
        family = self._arg(command, "family", self.config.maze.default_family)
        self.logger.debug("Creating maze", family=family)

        factory = self.state.family_registry.create_factory(family, self.config.maze)
        maze = MazeGame().create_maze(factory)

        result = {"family": family}
        result.update(maze.to_dict())
        result["rendered"] = maze.render(self.config.maze.banner_width)
        return result


class BuildMazeCLIHandler(CLICommandHandler):
    """Handler for ``maze build``: assembles the maze through a builder."""

    def handle(self, command) -> Dict[str, Any]:
        builder_name = self._arg(command, "builder", self.config.maze.default_builder)
        self.logger.debug("Building maze", builder=builder_name)

        builder = self.state.family_registry.create_builder(builder_name, self.config.maze)
        maze = MazeGame().build_maze(builder)

        result: Dict[str, Any] = {"builder": builder_name}
        if isinstance(builder, CountingMazeBuilder):
            rooms, doors = builder.get_counts()
            result.update({"rooms": rooms, "doors": doors})
        if maze is None:
            result["maze"] = None
            if "rooms" in result:
                result["rendered"] = (
                    f"The maze has\nrooms {result['rooms']}\ndoors {result['doors']}\n"
                )
        else:
            result.update(maze.to_dict())
            result["rendered"] = maze.render(self.config.maze.banner_width)
        return result


class ListFamiliesCLIHandler(CLICommandHandler):
    """Handler for ``families list``."""

    def handle(self, command) -> Dict[str, Any]:
        registry = self.state.family_registry
        descriptions = registry.describe()
        return {
            "factories": [
                {"name": name, "description": description}
                for name, description in descriptions[registry.FACTORY].items()
            ],
            "builders": [
                {"name": name, "description": description}
                for name, description in descriptions[registry.BUILDER].items()
            ],
        }
