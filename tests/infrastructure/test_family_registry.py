"""Tests for the family registry."""

import pytest
from unittest.mock import Mock

from patternplayground.config.schemas import MazeConfig
from patternplayground.domain.base.exceptions import ConfigurationError
from patternplayground.domain.maze import (
    BombedMazeFactory,
    CountingMazeBuilder,
    EnchantedMazeFactory,
    MazePrototypeFactory,
    NormalMazeFactory,
    RoomWithABomb,
    StandardMazeBuilder,
)
from patternplayground.infrastructure.registry import FamilyRegistry, UnsupportedFamilyError


@pytest.mark.unit
class TestFamilyRegistry:
    """Test cases for FamilyRegistry."""

    def test_builtin_factory_names(self, family_registry):
        assert family_registry.factory_names() == [
            "normal", "enchanted", "bombed", "prototype", "prototype-bombed",
        ]
        assert family_registry.builder_names() == ["standard", "counting"]

    @pytest.mark.parametrize(
        "family_name, expected_class",
        [
            ("normal", NormalMazeFactory),
            ("enchanted", EnchantedMazeFactory),
            ("bombed", BombedMazeFactory),
            ("prototype", MazePrototypeFactory),
        ],
    )
    def test_create_factory(self, family_registry, family_name, expected_class):
        assert isinstance(family_registry.create_factory(family_name), expected_class)

    def test_each_call_creates_a_new_factory(self, family_registry):
        assert family_registry.create_factory("normal") is not family_registry.create_factory("normal")

    def test_enchanted_spell_comes_from_config(self, family_registry):
        factory = family_registry.create_factory("enchanted", MazeConfig(enchanted_spell="xyzzy"))

        assert factory.spell.words == "xyzzy"

    def test_bombed_prototype_family(self, family_registry):
        factory = family_registry.create_factory("prototype-bombed")

        assert isinstance(factory.make_room(3), RoomWithABomb)

    def test_create_builder(self, family_registry):
        assert isinstance(family_registry.create_builder("standard"), StandardMazeBuilder)
        assert isinstance(family_registry.create_builder("counting"), CountingMazeBuilder)

    def test_unknown_family(self, family_registry):
        with pytest.raises(UnsupportedFamilyError) as exc_info:
            family_registry.create_factory("haunted")

        assert "haunted" in str(exc_info.value)
        with pytest.raises(UnsupportedFamilyError):
            family_registry.create_builder("normal")

    def test_duplicate_registration_fails(self, family_registry):
        with pytest.raises(ConfigurationError):
            family_registry.register_factory("normal", lambda config: NormalMazeFactory())

    def test_factory_and_builder_namespaces_are_separate(self):
        registry = FamilyRegistry()
        creator = Mock(return_value=NormalMazeFactory())

        registry.register_factory("custom", creator, "Custom family")
        registry.register_builder("custom", lambda config: CountingMazeBuilder())

        config = MazeConfig()
        registry.create_factory("custom", config)
        creator.assert_called_once_with(config)
        assert registry.is_registered(FamilyRegistry.FACTORY, "custom")
        assert registry.is_registered(FamilyRegistry.BUILDER, "custom")
        assert registry.describe()[FamilyRegistry.FACTORY] == {"custom": "Custom family"}
