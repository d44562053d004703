"""Infrastructure registry patterns."""

from .family_registry import (
    FamilyRegistration,
    FamilyRegistry,
    UnsupportedFamilyError,
    register_builtin_families,
)

__all__ = [
    'FamilyRegistration',
    'FamilyRegistry',
    'UnsupportedFamilyError',
    'register_builtin_families',
]
