"""
Repository layer for data access.

Provides generic data access abstractions following the Repository pattern,
isolating database access from business logic.
"""

from dolphin.repositories.minimal import MinimalRepository
from dolphin.repositories.repository import Repository

__all__ = ["MinimalRepository", "Repository"]
