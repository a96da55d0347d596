"""
Repository with counting, predicate filtering and paging.

Extends MinimalRepository with read-only queries. Predicates are
SQLAlchemy boolean expressions forwarded to the WHERE clause unchanged.
"""

import logging
from typing import List, Optional

from sqlalchemy import ColumnElement, func, select

from dolphin.common.paginator import page_window
from dolphin.core.config import settings
from dolphin.models.base import Key
from dolphin.repositories.minimal import MinimalRepository, ModelT

logger = logging.getLogger(__name__)


class Repository(MinimalRepository[ModelT]):
    """
    Repository for CRUD plus aggregate and filtered access.

    None of the methods added here mutate the store.

    Example:
        >>> class FooRepository(Repository[Foo]):
        ...     model = Foo
        >>> repo = FooRepository(session)
        >>> await repo.count(Foo.age >= 18)
        42
        >>> await repo.paged(2, 10, Foo.name.like("A%"))
        [Foo(id=11, name='Ada'), ...]
    """

    async def count(self, predicate: Optional[ColumnElement[bool]] = None) -> int:
        """
        Count records, optionally only those matching a predicate.

        Args:
            predicate: Filter expression such as ``Foo.age > 30``

        Returns:
            Number of matching records
        """
        stmt = select(func.count()).select_from(self.model)
        if predicate is not None:
            stmt = stmt.where(predicate)
        return await self.session.scalar(stmt)

    async def exists(self, key: Key) -> bool:
        """
        Check whether a record with the given key is stored.

        Raises:
            InvalidKeyTypeError: If key is not an int or a str
        """
        return await self.retrieve_by_id(key) is not None

    async def find_all(self, predicate: ColumnElement[bool]) -> List[ModelT]:
        """
        Retrieve every record matching a predicate.

        Returns:
            List of matching entities in primary key order
        """
        result = await self.session.execute(self._select(predicate))
        return list(result.scalars().all())

    async def find_single(self, predicate: ColumnElement[bool]) -> Optional[ModelT]:
        """
        Retrieve the first record matching a predicate.

        Multiple matches are not an error; the one with the lowest primary
        key is returned.

        Returns:
            The first matching entity, or None if nothing matches
        """
        result = await self.session.execute(self._select(predicate).limit(1))
        return result.scalars().first()

    async def paged(
        self,
        page_number: int,
        page_size: Optional[int] = None,
        predicate: Optional[ColumnElement[bool]] = None,
    ) -> List[ModelT]:
        """
        Retrieve one page of records, optionally filtered first.

        Args:
            page_number: 1-based page number, values below 1 read page 1
            page_size: Number of records per page, defaults to
                settings.default_page_size
            predicate: Filter applied before windowing

        Returns:
            Records ``[(page_number - 1) * page_size, page_number * page_size)``
            in primary key order; empty past the last page

        Raises:
            ValueError: If page_size is less than 1
        """
        if page_size is None:
            page_size = settings.default_page_size

        page_number, start, _ = page_window(page_number, page_size)
        stmt = self._select(predicate).offset(start).limit(page_size)

        result = await self.session.execute(stmt)
        records = list(result.scalars().all())

        logger.debug(
            "Page retrieved",
            extra={
                "entity": self.entity_name,
                "operation": "paged",
                "page_number": page_number,
                "page_size": page_size,
                "returned": len(records),
            },
        )
        return records
