import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from todo_api.errors import StoreError, TodoNotFoundError
from todo_api.repositories.todo_repo import TodoRepository
from todo_api.schemas.todo import (
    TodoCreate,
    TodoDeleted,
    TodoList,
    TodoOut,
    TodoUpdate,
    parse_todo_id,
    storable_id,
)

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(message: str) -> Iterator[None]:
    """Re-raise any SQLAlchemy failure as a StoreError carrying the driver's text."""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception(message)
        orig = getattr(exc, "orig", None)
        raise StoreError(message, str(orig if orig is not None else exc)) from exc


def _to_out(todo) -> Optional[TodoOut]:
    if todo is None:
        return None
    return TodoOut.model_validate(todo)


class TodoService:
    """
    Path ids arrive as raw strings. An id no row can carry (not an integer,
    or outside SQLite's range) is treated as a miss without touching the store.
    """

    def __init__(self, repo: Optional[TodoRepository] = None):
        self.repo = repo or TodoRepository()

    async def list_todos(self, db: AsyncSession) -> TodoList:
        with store_errors("Failed to fetch todos."):
            todos = await self.repo.list(db)
        items = [TodoOut.model_validate(t) for t in todos]
        return TodoList(todos=items, total=len(items), skip=0, limit=len(items))

    async def get_todo(self, db: AsyncSession, raw_id: str) -> TodoOut:
        todo = None
        todo_id = storable_id(raw_id)
        if todo_id is not None:
            with store_errors(f"Failed to fetch todo {raw_id}."):
                todo = await self.repo.get(db, todo_id)
        if todo is None:
            raise TodoNotFoundError(raw_id)
        return _to_out(todo)

    async def create_todo(self, db: AsyncSession, todo_in: TodoCreate) -> Optional[TodoOut]:
        with store_errors("Failed to create todo."):
            todo = await self.repo.create(db, todo_in)
        if todo is None:
            # the row vanished between insert and read-back
            logger.warning("Created todo was gone before it could be read back")
        else:
            logger.info("Created todo %s", todo.id)
        return _to_out(todo)

    async def update_todo(
        self, db: AsyncSession, raw_id: str, todo_in: TodoUpdate
    ) -> Optional[TodoOut]:
        """Missing ids are not an error: the response is simply null."""
        changes = todo_in.changes()
        todo = None
        todo_id = storable_id(raw_id)
        if todo_id is not None:
            with store_errors(f"Failed to update todo {raw_id}."):
                todo = await self.repo.update(db, todo_id, changes)
        if todo is None:
            logger.info("Update of todo %s matched no row", raw_id)
        else:
            logger.info("Updated todo %s (%s)", raw_id, ", ".join(sorted(changes)))
        return _to_out(todo)

    async def delete_todo(self, db: AsyncSession, raw_id: str) -> TodoDeleted:
        removed = False
        todo_id = storable_id(raw_id)
        if todo_id is not None:
            with store_errors(f"Failed to delete todo {raw_id}."):
                removed = await self.repo.delete(db, todo_id)
        logger.info("Deleted todo %s (row matched: %s)", raw_id, removed)
        return TodoDeleted(id=parse_todo_id(raw_id))
