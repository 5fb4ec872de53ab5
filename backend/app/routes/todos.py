"""
Todo API — Todo Route Handlers
===============================

What:  HTTP adapters for the Todo resource.
How:   Each handler extracts transport inputs, calls TodoService, and maps
       the outcome onto a status code and a JSON envelope. No business logic.

Routes:
    GET    /todos           list (limit/page query params)
    POST   /todo            create
    GET    /todo/{todo_id}  get by id
    PATCH  /todo/{todo_id}  partial update
    DELETE /todo/{todo_id}  delete

Dependency chain (per request):
    get_db_session → get_todo_repository → get_todo_service
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db_session
from app.exceptions import DomainError, TitleAlreadyExistsError
from app.repositories.todo_repository import TodoRepository
from app.schemas.todo import (
    MessageResponse,
    NoteData,
    NoteEnvelope,
    TodoCreate,
    TodoData,
    TodoEnvelope,
    TodoListResponse,
    TodoResponse,
    TodoUpdate,
)
from app.services.todo_service import TodoService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Todos"])

LIST_FAILURE_MESSAGE = "Something bad happened while fetching all todo items"


# ── Dependencies ──────────────────────────────────────────────────────────

def get_todo_repository(db: AsyncSession = Depends(get_db_session)) -> TodoRepository:
    return TodoRepository(db)


def get_todo_service(
    repository: TodoRepository = Depends(get_todo_repository),
) -> TodoService:
    return TodoService(repository)


def message_response(status_code: int, envelope_status: str, message: str) -> JSONResponse:
    """Builds a `{status, message}` envelope for fail/error outcomes."""
    body = MessageResponse(status=envelope_status, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


# ── Handlers ──────────────────────────────────────────────────────────────

@router.get(
    "/todos",
    response_model=TodoListResponse,
    responses={500: {"description": "Store failure", "model": MessageResponse}},
    summary="List todos",
    description="Returns todos ordered by id. `page` is 1-based; offset = (page - 1) * limit.",
)
async def list_todos(
    limit: int = Query(default=settings.default_page_limit, ge=1, description="Items per page"),
    page: int = Query(default=1, ge=1, description="1-based page number"),
    service: TodoService = Depends(get_todo_service),
):
    offset = (page - 1) * limit
    try:
        todos = await service.list_todos(limit=limit, offset=offset)
    except DomainError:
        # Detail already logged by the service
        return message_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "fail", LIST_FAILURE_MESSAGE)

    return TodoListResponse(
        results=len(todos),
        todo=[TodoResponse.model_validate(t) for t in todos],
    )


@router.post(
    "/todo",
    status_code=status.HTTP_201_CREATED,
    response_model=TodoEnvelope,
    responses={
        409: {"description": "Title already exists", "model": MessageResponse},
        500: {"description": "Store failure", "model": MessageResponse},
    },
    summary="Create a todo",
)
async def create_todo(
    payload: TodoCreate,
    service: TodoService = Depends(get_todo_service),
):
    try:
        todo = await service.create_todo(payload)
    except TitleAlreadyExistsError as e:
        return message_response(status.HTTP_409_CONFLICT, "fail", e.message)
    except DomainError as e:
        return message_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "error", e.message)

    logger.info("Created todo %s", todo.id)
    return TodoEnvelope(data=TodoData(todo=TodoResponse.model_validate(todo)))


@router.get(
    "/todo/{todo_id}",
    response_model=TodoEnvelope,
    responses={404: {"description": "Todo not found", "model": MessageResponse}},
    summary="Get a todo by id",
)
async def get_todo(
    todo_id: UUID,
    service: TodoService = Depends(get_todo_service),
):
    try:
        todo = await service.get_todo(todo_id)
    except DomainError as e:
        return message_response(status.HTTP_404_NOT_FOUND, "fail", e.message)

    return TodoEnvelope(data=TodoData(todo=TodoResponse.model_validate(todo)))


@router.patch(
    "/todo/{todo_id}",
    response_model=NoteEnvelope,
    responses={500: {"description": "Todo not updated", "model": MessageResponse}},
    summary="Partially update a todo",
    description="Fields that are omitted or null keep their stored values.",
)
async def update_todo(
    todo_id: UUID,
    payload: TodoUpdate,
    service: TodoService = Depends(get_todo_service),
):
    try:
        todo = await service.update_todo(todo_id, payload)
    except DomainError as e:
        return message_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "error", e.message)

    return NoteEnvelope(data=NoteData(note=TodoResponse.model_validate(todo)))


@router.delete(
    "/todo/{todo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"description": "Todo not found", "model": MessageResponse}},
    summary="Delete a todo",
)
async def delete_todo(
    todo_id: UUID,
    service: TodoService = Depends(get_todo_service),
):
    try:
        await service.delete_todo(todo_id)
    except DomainError as e:
        return message_response(status.HTTP_404_NOT_FOUND, "fail", e.message)

    logger.info("Deleted todo %s", todo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
