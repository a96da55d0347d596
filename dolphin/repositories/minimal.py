"""
Minimal repository providing CRUD operations for one entity type.

Mutating calls report an OperationResult instead of raising, and read
calls return fully materialized entities from the bound async session.
"""

import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import ColumnElement, Select, delete, inspect, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from dolphin.common.operation_result import OperationResult
from dolphin.core.exceptions import InvalidKeyTypeError
from dolphin.core.logging_config import log_with_context
from dolphin.models.base import Entity, Key

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Entity)


class MinimalRepository(Generic[ModelT]):
    """
    Repository for basic CRUD access to a single mapped entity type.

    Subclasses bind the entity type through the ``model`` class attribute,
    or callers pass it to the constructor. The entity must expose its
    single-column primary key as ``id``.

    Attributes:
        session: SQLAlchemy async session for database operations
        model: Mapped entity class managed by this repository
        last_error: Fault swallowed by the most recent mutating call, if any

    Example:
        >>> class FooRepository(MinimalRepository[Foo]):
        ...     model = Foo
        >>> repo = FooRepository(session)
        >>> await repo.save(Foo(name="Ada"))
        <OperationResult.SUCCESS: 'success'>
    """

    model: Optional[Type[Any]] = None

    def __init__(self, session: AsyncSession, model: Optional[Type[ModelT]] = None):
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            model: Entity class, overrides the class-level ``model``

        Raises:
            ValueError: If session or model is missing, or the model does
                not have a single-column primary key
        """
        if session is None:
            raise ValueError("session is required")

        model = model or type(self).model
        if model is None:
            raise ValueError(
                f"{type(self).__name__} has no model; set the class attribute "
                f"or pass model= to the constructor"
            )

        mapper = inspect(model)
        if len(mapper.primary_key) != 1:
            raise ValueError(
                f"{model.__name__} must have a single-column primary key"
            )

        self.session = session
        self.model = model
        self.last_error: Optional[Exception] = None
        self._value_attrs = [
            attr.key
            for attr in mapper.column_attrs
            if not any(column.primary_key for column in attr.columns)
        ]

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    async def save(self, entity: ModelT) -> OperationResult:
        """
        Persist a new entity.

        Args:
            entity: Transient entity to insert

        Returns:
            SUCCESS if the commit wrote at least one record, FAILED otherwise

        Note:
            Store faults (constraint violations, connection errors) are
            rolled back, logged and kept on ``last_error``.
        """
        self.last_error = None
        try:
            self.session.add(entity)
            affected = await self._commit()
        except Exception as exc:
            await self._fail("save", exc)
            return OperationResult.FAILED

        log_with_context(
            logger, "debug", "Save committed",
            entity=self.entity_name, operation="save", affected=affected,
        )
        return OperationResult.from_affected(affected)

    async def update(self, entity: ModelT) -> OperationResult:
        """
        Overwrite the stored record that shares the entity's key.

        The incoming entity does not need to be the instance tracked by
        the session; its column values are written with a single keyed
        UPDATE and the session's tracked copy is synchronized.

        Args:
            entity: Entity carrying the key and the new column values

        Returns:
            SUCCESS if a stored record was updated, FAILED if no record has
            that key or the store raised

        Note:
            This is a full replacement. Every non-key column is written from
            the incoming entity, so pass a fully populated entity: attributes
            left unset are written as NULL, and a NOT NULL column then fails
            the statement and the call returns FAILED.
        """
        self.last_error = None
        key = None
        try:
            key = await self._key_of(entity)
            if key is None or await self.session.get(self.model, key) is None:
                log_with_context(
                    logger, "debug", "Update skipped, no stored record",
                    entity=self.entity_name, operation="update", key=key,
                )
                return OperationResult.FAILED

            values = await self._read_attrs(entity, self._value_attrs)
            stmt = (
                update(self.model)
                .where(self.model.id == key)
                .values(**values)
            )
            result = await self.session.execute(stmt)
            affected = result.rowcount
            await self.session.commit()
        except Exception as exc:
            await self._fail("update", exc, key=key)
            return OperationResult.FAILED

        log_with_context(
            logger, "debug", "Update committed",
            entity=self.entity_name, operation="update",
            key=key, affected=affected,
        )
        return OperationResult.from_affected(affected)

    async def delete(self, entity: ModelT) -> OperationResult:
        """
        Remove the stored record that shares the entity's key.

        Args:
            entity: Entity to remove

        Returns:
            SUCCESS if a record was removed, FAILED if none matched the key
            or the store raised
        """
        self.last_error = None
        key = None
        try:
            key = await self._key_of(entity)
            stmt = delete(self.model).where(self.model.id == key)
            result = await self.session.execute(stmt)
            affected = result.rowcount
            await self.session.commit()
        except Exception as exc:
            await self._fail("delete", exc, key=key)
            return OperationResult.FAILED

        log_with_context(
            logger, "debug", "Delete committed",
            entity=self.entity_name, operation="delete",
            key=key, affected=affected,
        )
        return OperationResult.from_affected(affected)

    async def retrieve_all(self) -> List[ModelT]:
        """
        Retrieve every record of the entity type.

        Returns:
            List of entities in primary key order
        """
        result = await self.session.execute(self._select())
        return list(result.scalars().all())

    async def retrieve_by_id(self, key: Key) -> Optional[ModelT]:
        """
        Retrieve an entity by its primary key.

        Args:
            key: Integer or string identifier

        Returns:
            The entity, or None if no record has that key

        Raises:
            InvalidKeyTypeError: If key is not an int or a str
        """
        self._check_key(key)
        return await self.session.get(self.model, key)

    def _check_key(self, key: Any) -> None:
        # bool is an int subclass but never a valid identifier
        if isinstance(key, bool) or not isinstance(key, (int, str)):
            raise InvalidKeyTypeError(key)

    def _select(self, predicate: Optional[ColumnElement[bool]] = None) -> Select:
        stmt = select(self.model)
        if predicate is not None:
            stmt = stmt.where(predicate)
        return stmt.order_by(self.model.id)

    async def _commit(self) -> int:
        """
        Commit pending changes and return how many records they touched.
        """
        session = self.session
        affected = (
            len(session.new)
            + len(session.deleted)
            + sum(1 for obj in session.dirty if session.is_modified(obj))
        )
        await session.commit()
        return affected

    async def _key_of(self, entity: Any) -> Any:
        return (await self._read_attrs(entity, ["id"]))["id"]

    async def _read_attrs(self, entity: Any, attrs: List[str]) -> Dict[str, Any]:
        """
        Read attributes of an entity that may hold expired state.

        Expired attributes lazy-load on access, which an AsyncSession only
        allows inside ``run_sync``.
        """
        return await self.session.run_sync(
            lambda _: {attr: getattr(entity, attr) for attr in attrs}
        )

    async def _fail(self, operation: str, exc: Exception, key: Any = None) -> None:
        self.last_error = exc
        log_with_context(
            logger, "warning", f"{operation.capitalize()} failed: {exc}",
            entity=self.entity_name, operation=operation,
            key=key, exc_info=exc,
        )
        try:
            await self.session.rollback()
        except Exception as rollback_exc:
            log_with_context(
                logger, "warning", f"Rollback after {operation} failed: {rollback_exc}",
                entity=self.entity_name, operation=operation,
                key=key, exc_info=rollback_exc,
            )
