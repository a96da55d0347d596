"""
Entity contract and ORM base classes.

Import mapped models through this package so they register with the
shared declarative base.
"""

from dolphin.models.base import (
    Base,
    Entity,
    IntKeyMixin,
    Key,
    ModelMixin,
    StringKeyMixin,
)

__all__ = [
    "Base",
    "Entity",
    "IntKeyMixin",
    "Key",
    "ModelMixin",
    "StringKeyMixin",
]
