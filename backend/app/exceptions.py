"""
Todo API — Custom Exception Hierarchy
======================================

What:  Defines the failure vocabulary of each layer.
How:   Every exception carries a message and an optional context dict.
       The gateway raises PersistenceError tagged with a StoreFailure kind;
       the service translates those into DomainError subclasses; the HTTP
       handlers map DomainError subclasses onto status codes and envelopes.

Exception Hierarchy:
    TodoAPIError (base)
    ├── PersistenceError(kind)       raw gateway signal, no business text
    └── DomainError                  operation-scoped reason for the caller
        ├── TitleAlreadyExistsError  → 409 fail
        ├── TodoNotFoundError        → 404 fail
        ├── TodoNotUpdatedError      → 500 error
        ├── TodoNotDeletedError      → 404 fail
        └── InternalServiceError     → 500 (detail only in server logs)

Security Note:
    `message` is safe to return to API consumers. `context` may hold
    internal details (driver error type, ids) and is only ever logged.
"""

import enum
from typing import Any, Dict, Optional
from uuid import UUID


class TodoAPIError(Exception):
    """
    Base exception for all Todo API application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


# ══════════════════════════════════════════════════════════════════════════
# Persistence Gateway signals
# ══════════════════════════════════════════════════════════════════════════


class StoreFailure(str, enum.Enum):
    """Kinds of raw failure the persistence gateway can report."""

    CONSTRAINT_VIOLATION = "constraint_violation"
    NOT_FOUND = "not_found"
    STORE_UNAVAILABLE = "store_unavailable"


class PersistenceError(TodoAPIError):
    """
    Raised by the gateway when a store interaction does not succeed.

    The `kind` tag is the only thing the service inspects; the driver error
    is chained as `__cause__` for logging.
    """

    def __init__(
        self,
        kind: StoreFailure,
        operation: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = dict(context or {})
        ctx["operation"] = operation
        super().__init__(message=f"{operation} failed: {kind.value}", context=ctx)
        self.kind = kind
        self.operation = operation


# ══════════════════════════════════════════════════════════════════════════
# Domain reasons
# ══════════════════════════════════════════════════════════════════════════


class DomainError(TodoAPIError):
    """Base class for reasons the service reports back to the handlers."""


class TitleAlreadyExistsError(DomainError):
    """A Todo with the requested title is already stored."""

    def __init__(self, title: Optional[str] = None):
        ctx = {"title": title} if title is not None else {}
        super().__init__(message="Todo with that title already exists", context=ctx)


class _TodoIdError(DomainError):
    """A domain reason that names the Todo it is about."""

    template = "Todo with ID: {todo_id}"

    def __init__(self, todo_id: UUID, context: Optional[Dict[str, Any]] = None):
        ctx = dict(context or {})
        ctx["todo_id"] = str(todo_id)
        super().__init__(message=self.template.format(todo_id=todo_id), context=ctx)
        self.todo_id = todo_id


class TodoNotFoundError(_TodoIdError):
    template = "Todo with ID: {todo_id} not found"


class TodoNotUpdatedError(_TodoIdError):
    template = "Todo with ID: {todo_id} not updated"


class TodoNotDeletedError(_TodoIdError):
    template = "Todo with ID: {todo_id} not deleted"


class InternalServiceError(DomainError):
    """
    An unexpected failure the caller cannot correct.

    The message is always generic; the cause is logged by the service.
    """

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__(message="Internal Server Error", context=context)
