"""Unit tests for maze factory families and the prototype factory."""

import pytest

from patternplayground.domain.base.ports import MazeFactory
from patternplayground.domain.maze import (
    BombedMazeFactory,
    BombedWall,
    DefaultMazeFactory,
    Door,
    DoorNeedingSpell,
    EnchantedMazeFactory,
    EnchantedRoom,
    Maze,
    MazePrototypeFactory,
    NormalMazeFactory,
    Room,
    RoomWithABomb,
    Spell,
    Wall,
)


@pytest.mark.unit
class TestFactoryFamilies:
    """Each family overrides only what it changes."""

    def test_normal_family_makes_plain_elements(self, normal_factory):
        room1 = normal_factory.make_room(1)
        room2 = normal_factory.make_room(2)
        door = normal_factory.make_door(room1, room2)

        assert type(normal_factory.make_maze()) is Maze
        assert type(normal_factory.make_wall()) is Wall
        assert type(room1) is Room
        assert type(door) is Door
        assert door.room1 is room1 and door.room2 is room2

    def test_factories_implement_port(self):
        for factory in (DefaultMazeFactory(), NormalMazeFactory(),
                        EnchantedMazeFactory(), BombedMazeFactory()):
            assert isinstance(factory, MazeFactory)

    def test_enchanted_family_overrides_rooms_and_doors_only(self, enchanted_factory):
        room1 = enchanted_factory.make_room(1)
        room2 = enchanted_factory.make_room(2)
        door = enchanted_factory.make_door(room1, room2)

        assert isinstance(room1, EnchantedRoom)
        assert room1.spell == Spell(words="open sesame")
        assert isinstance(door, DoorNeedingSpell)
        assert door.required_spell == Spell(words="open sesame")
        assert type(enchanted_factory.make_wall()) is Wall

    def test_enchanted_family_default_spell(self):
        factory = EnchantedMazeFactory()

        assert factory.spell.words == "abracadabra"

    def test_bombed_family_overrides_walls_and_rooms_only(self, bombed_factory):
        wall = bombed_factory.make_wall()
        room1 = bombed_factory.make_room(1)
        room2 = bombed_factory.make_room(2)

        assert isinstance(wall, BombedWall) and wall.is_bombed is False
        assert isinstance(room1, RoomWithABomb) and room1.is_armed is False
        assert type(bombed_factory.make_door(room1, room2)) is Door


@pytest.mark.unit
class TestMazePrototypeFactory:
    """Test cases for the cloning factory."""

    def setup_method(self):
        self.factory = MazePrototypeFactory(Maze(), BombedWall(), Door(), RoomWithABomb(room_no=0))

    def test_clones_are_new_instances(self):
        wall1 = self.factory.make_wall()
        wall2 = self.factory.make_wall()

        assert isinstance(wall1, BombedWall)
        assert wall1 is not wall2
        assert wall1 is not self.factory.prototype_wall

    def test_cloned_room_gets_requested_number(self):
        room = self.factory.make_room(5)

        assert isinstance(room, RoomWithABomb)
        assert room.room_no == 5
        assert self.factory.prototype_room.room_no == 0

    def test_cloned_door_is_initialized_with_rooms(self):
        room1 = self.factory.make_room(1)
        room2 = self.factory.make_room(2)

        door = self.factory.make_door(room1, room2)

        assert door.room1 is room1
        assert door.room2 is room2
        assert self.factory.prototype_door.is_connected is False

    def test_cloned_maze_is_empty(self):
        self.factory.prototype_maze.add_room(Room(room_no=1))

        assert len(self.factory.make_maze()) == 0

    def test_room_class_instead_of_prototype(self):
        factory = MazePrototypeFactory(Maze(), Wall(), Door(), RoomWithABomb)

        room = factory.make_room(4)

        assert type(room) is RoomWithABomb
        assert room.room_no == 4
        assert factory.make_room(5) is not room
