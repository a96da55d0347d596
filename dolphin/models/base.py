"""
Base models and mixins for SQLAlchemy ORM.

Provides the declarative base, the entity contract every repository relies
on, key mixins for integer and string identifiers, and common utilities
for all mapped entities.
"""

from typing import Any, Protocol, Union, runtime_checkable
import uuid

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import declarative_base


# SQLAlchemy declarative base for all ORM models
Base = declarative_base()


# Key types accepted by repository lookups
Key = Union[int, str]


@runtime_checkable
class Entity(Protocol):
    """
    Contract for a persisted record.

    A record exposes a single identifier that is stable for its lifetime
    and unique within its entity type.
    """

    id: Any


class IntKeyMixin:
    """
    Mixin that adds an autoincrement integer primary key column.

    Attributes:
        id: Integer primary key, assigned by the store on insert
    """

    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        doc="Integer primary key"
    )


class StringKeyMixin:
    """
    Mixin that adds a string primary key column.

    Defaults to a UUID4 rendered as TEXT for SQLite compatibility, so
    callers may either supply their own key or let the insert assign one.

    Attributes:
        id: String primary key
    """

    id = Column(
        String,
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
        doc="String primary key"
    )


class ModelMixin:
    """
    Mixin providing common model utilities.

    Adds helper methods for serialization and representation.
    """

    def to_dict(self) -> dict[str, Any]:
        """
        Convert model instance to dictionary.

        Returns:
            Dictionary with all column values

        Note:
            Only includes columns, not relationships.
        """
        return {
            column.name: getattr(self, column.name)
            for column in self.__table__.columns
        }

    def __repr__(self) -> str:
        """
        String representation of model instance.

        Returns:
            String like "ModelName(id=1, name='value')"
        """
        attrs = ", ".join(
            f"{key}={repr(value)}"
            for key, value in self.to_dict().items()
            if key in ["id", "name", "title"]  # Key identifying fields
        )
        return f"{self.__class__.__name__}({attrs})"
