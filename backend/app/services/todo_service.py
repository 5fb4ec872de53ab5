"""
Todo API — Todo Service (Business Rules)
=========================================

What:  Wraps each gateway operation and turns raw store failures into
       domain reasons the HTTP handlers understand.
How:   Catches PersistenceError, inspects its StoreFailure kind, logs the
       unexpected ones, and raises a DomainError subclass instead.
Who:   Called by route handlers; calls TodoRepository.

Failure mapping:
    create_todo  CONSTRAINT_VIOLATION → TitleAlreadyExistsError
                 anything else        → InternalServiceError
    list_todos   anything             → InternalServiceError
    get_todo     anything, no row, or more than one row → TodoNotFoundError
    update_todo  anything             → TodoNotUpdatedError
    delete_todo  anything, or no row removed            → TodoNotDeletedError

Title uniqueness is never pre-checked here; the store's constraint decides
and the service only interprets its signal.
"""

import logging
from typing import List
from uuid import UUID

from app.exceptions import (
    InternalServiceError,
    PersistenceError,
    StoreFailure,
    TitleAlreadyExistsError,
    TodoNotDeletedError,
    TodoNotFoundError,
    TodoNotUpdatedError,
)
from app.models.todo import Todo
from app.repositories.todo_repository import TodoRepository
from app.schemas.todo import TodoCreate, TodoUpdate

logger = logging.getLogger(__name__)


class TodoService:
    """
    Business logic layer for Todo operations.

    Stateless apart from the repository handle; holds no copy of entity
    state beyond a single call.
    """

    def __init__(self, repository: TodoRepository):
        self.repository = repository

    async def create_todo(self, data: TodoCreate) -> Todo:
        """
        Store a new Todo.

        Raises:
            TitleAlreadyExistsError: the title is taken (→ 409)
            InternalServiceError: any other store failure (→ 500)
        """
        try:
            return await self.repository.create(data)
        except PersistenceError as e:
            if e.kind is StoreFailure.CONSTRAINT_VIOLATION:
                raise TitleAlreadyExistsError(title=data.title) from e
            logger.error("Store error creating todo: %s", e.message, exc_info=True)
            raise InternalServiceError(context=e.context) from e

    async def list_todos(self, limit: int, offset: int) -> List[Todo]:
        """Page of Todos ordered by id; an empty page is a success."""
        try:
            return await self.repository.list(limit, offset)
        except PersistenceError as e:
            logger.error("Store error listing todos: %s", e.message, exc_info=True)
            raise InternalServiceError(context=e.context) from e

    async def get_todo(self, todo_id: UUID) -> Todo:
        """
        The Todo with this id.

        Exactly one matching row is the only success; zero rows or an
        ambiguous result is reported as not found.
        """
        try:
            rows = await self.repository.get_by_id(todo_id)
        except PersistenceError as e:
            logger.error("Store error fetching todo %s: %s", todo_id, e.message, exc_info=True)
            raise TodoNotFoundError(todo_id, context=e.context) from e

        if len(rows) != 1:
            raise TodoNotFoundError(todo_id, context={"rows": len(rows)})
        return rows[0]

    async def update_todo(self, todo_id: UUID, data: TodoUpdate) -> Todo:
        """Apply a partial update; unset fields keep their stored values."""
        try:
            return await self.repository.update(todo_id, data)
        except PersistenceError as e:
            if e.kind is StoreFailure.STORE_UNAVAILABLE:
                logger.error("Store error updating todo %s: %s", todo_id, e.message, exc_info=True)
            else:
                logger.info("Todo %s not updated: %s", todo_id, e.kind.value)
            raise TodoNotUpdatedError(todo_id, context=e.context) from e

    async def delete_todo(self, todo_id: UUID) -> None:
        """
        Hard-delete the Todo.

        Raises:
            TodoNotDeletedError: nothing was removed or the store failed
        """
        try:
            deleted = await self.repository.delete(todo_id)
        except PersistenceError as e:
            logger.error("Store error deleting todo %s: %s", todo_id, e.message, exc_info=True)
            raise TodoNotDeletedError(todo_id, context=e.context) from e

        if not deleted:
            raise TodoNotDeletedError(todo_id)
