from typing import Any, Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.errors import InvalidInputError
from todo_api.schemas.todo import (
    InvalidInput,
    TodoDeleted,
    TodoList,
    TodoOut,
    parse_create,
    parse_update,
)
from todo_api.services.todo_service import TodoService
from todo_api.database import get_db

router = APIRouter()
service = TodoService()

@router.get("", response_model=TodoList)
async def list_todos(db: AsyncSession = Depends(get_db)):
    return await service.list_todos(db)

@router.get("/{todo_id}", response_model=TodoOut)
async def get_todo(todo_id: str, db: AsyncSession = Depends(get_db)):
    return await service.get_todo(db, todo_id)

# 200 rather than 201: existing clients check for it
@router.post("/add", response_model=Optional[TodoOut], status_code=200)
async def create_todo(payload: Any = Body(None), db: AsyncSession = Depends(get_db)):
    todo_in = parse_create(payload)
    if isinstance(todo_in, InvalidInput):
        raise InvalidInputError(todo_in.value)
    return await service.create_todo(db, todo_in)

@router.put("/{todo_id}", response_model=Optional[TodoOut])
async def update_todo(todo_id: str, payload: Any = Body(None), db: AsyncSession = Depends(get_db)):
    todo_in = parse_update(payload)
    if isinstance(todo_in, InvalidInput):
        raise InvalidInputError(todo_in.value)
    return await service.update_todo(db, todo_id, todo_in)

@router.delete("/{todo_id}", response_model=TodoDeleted)
async def delete_todo(todo_id: str, db: AsyncSession = Depends(get_db)):
    return await service.delete_todo(db, todo_id)
