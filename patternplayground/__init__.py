"""Pattern Playground - Root Package.

This package collects classic object-oriented design pattern demonstrations
built around a small maze domain (rooms, walls, doors) and a small
alert-dialog domain.

Key Components:
    - domain: Map sites, the maze aggregate, factory and builder families
    - application: The maze assembly algorithm (MazeGame)
    - config: Configuration schemas and loading
    - infrastructure: Logging, the family registry and process-wide state
    - interface: CLI command handlers
    - cli: Command-line entry point

Architecture:
    The construction algorithm is written once against the MazeFactory and
    MazeBuilder ports; concrete families only override element creation.
"""

from ._package import PACKAGE_NAME, __version__

__author__ = "Pattern Playground Contributors"
__package_name__ = PACKAGE_NAME
