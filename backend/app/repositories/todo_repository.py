"""
Todo API — Todo Repository (Persistence Gateway)
=================================================

What:  Issues parameterized queries against the `todo` table.
How:   Wraps one AsyncSession. Writes are committed here so that store
       failures surface inside the gateway, where they are tagged with a
       StoreFailure kind and raised as PersistenceError.
Who:   Constructed per request by app.routes.todos.get_todo_repository and
       used only by TodoService.

Failure signals:
    CONSTRAINT_VIOLATION  the INSERT/UPDATE hit the UNIQUE(title) constraint
    NOT_FOUND             update() found no row for the id
    STORE_UNAVAILABLE     anything else (connectivity, malformed query, ...)

Classification is by exception type (IntegrityError), never by message text.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, List
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import PersistenceError, StoreFailure
from app.models.todo import Todo, utcnow
from app.schemas.todo import TodoCreate, TodoUpdate

logger = logging.getLogger(__name__)


class TodoRepository:
    """
    Sole reader and writer of Todo rows.

    Holds nothing but the session handle; a fresh instance is cheap to
    build for every request.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    @asynccontextmanager
    async def _store_interaction(self, operation: str) -> AsyncIterator[None]:
        """Translates driver/ORM errors raised inside the block into PersistenceError."""
        try:
            yield
        except PersistenceError:
            raise
        except IntegrityError as e:
            await self._rollback(operation)
            raise PersistenceError(
                StoreFailure.CONSTRAINT_VIOLATION,
                operation,
                context={"error_type": type(e).__name__},
            ) from e
        except (SQLAlchemyError, OSError) as e:
            await self._rollback(operation)
            raise PersistenceError(
                StoreFailure.STORE_UNAVAILABLE,
                operation,
                context={"error_type": type(e).__name__},
            ) from e

    async def _rollback(self, operation: str) -> None:
        try:
            await self._session.rollback()
        except (SQLAlchemyError, OSError):
            # Caller re-raises the first failure
            logger.warning("Rollback after failed %s also failed", operation, exc_info=True)

    # ── Operations ────────────────────────────────────────────────────────

    async def create(self, data: TodoCreate) -> Todo:
        """
        INSERT a new row; the store fills id, timestamps and `published`.

        Raises:
            PersistenceError(CONSTRAINT_VIOLATION): title already stored
            PersistenceError(STORE_UNAVAILABLE): any other store error
        """
        todo = Todo(
            title=data.title,
            content=data.content,
            category=data.category if data.category is not None else "",
        )
        async with self._store_interaction("create"):
            self._session.add(todo)
            await self._session.commit()
            await self._session.refresh(todo)
        return todo

    async def list(self, limit: int, offset: int) -> List[Todo]:
        """
        Rows ordered by id ascending, windowed by limit/offset.

        limit and offset are passed to the store unchecked.
        """
        async with self._store_interaction("list"):
            result = await self._session.execute(
                select(Todo).order_by(Todo.id).limit(limit).offset(offset)
            )
            return list(result.scalars().all())

    async def get_by_id(self, todo_id: UUID) -> List[Todo]:
        """Zero or one rows matching the id; the caller decides what empty means."""
        async with self._store_interaction("get_by_id"):
            result = await self._session.execute(
                select(Todo).where(Todo.id == todo_id)
            )
            return list(result.scalars().all())

    async def update(self, todo_id: UUID, data: TodoUpdate) -> Todo:
        """
        Read the current row, then write it back with the provided fields
        replaced and `updated_at` set to now, in one UPDATE statement.

        Stored NULLs in optional columns that are not replaced are written
        back as their zero value ("" / False).

        Raises:
            PersistenceError(NOT_FOUND): no row for todo_id
            PersistenceError(CONSTRAINT_VIOLATION): new title already stored
            PersistenceError(STORE_UNAVAILABLE): any other store error
        """
        async with self._store_interaction("update"):
            result = await self._session.execute(
                select(Todo).where(Todo.id == todo_id)
            )
            todo = result.scalar_one_or_none()
            if todo is None:
                raise PersistenceError(
                    StoreFailure.NOT_FOUND,
                    "update",
                    context={"todo_id": str(todo_id)},
                )

            changes = data.provided_fields()
            todo.title = changes.get("title", todo.title)
            todo.content = changes.get("content", todo.content)
            todo.category = changes.get("category", todo.category or "")
            todo.published = changes.get("published", bool(todo.published))
            todo.updated_at = utcnow()

            await self._session.commit()
            await self._session.refresh(todo)
        return todo

    async def delete(self, todo_id: UUID) -> bool:
        """
        DELETE by id.

        Returns True only when exactly one row was removed. Zero rows gives
        False; more than one row is treated as a failure, rolled back, and
        also reported as False.
        """
        async with self._store_interaction("delete"):
            result = await self._session.execute(
                delete(Todo).where(Todo.id == todo_id)
            )
            rows_affected = result.rowcount
            if rows_affected != 1:
                await self._session.rollback()
                if rows_affected > 1:
                    logger.error(
                        "Delete of %s affected %d rows; rolled back", todo_id, rows_affected
                    )
                return False
            await self._session.commit()
        return True
