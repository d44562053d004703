"""Maze construction configuration schema."""

from pydantic import BaseModel, Field, field_validator


class MazeConfig(BaseModel):
    """Defaults used when a maze is created without naming a family."""

    default_family: str = Field("normal", description="Factory family name")
    default_builder: str = Field("standard", description="Builder name")
    enchanted_spell: str = Field(
        "abracadabra", description="Spell used by the enchanted family"
    )
    banner_width: int = Field(27, description="Width of the rendering banner")

    @field_validator("banner_width")
    @classmethod
    def validate_banner_width(cls, v: int) -> int:
        """Validate banner width."""
        if v < 1:
            raise ValueError("Banner width must be at least 1")
        return v

    @field_validator("enchanted_spell")
    @classmethod
    def validate_spell(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Enchanted spell must not be blank")
        return v
