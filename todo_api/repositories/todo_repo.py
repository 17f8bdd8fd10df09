from typing import Optional

from sqlalchemy import delete as sa_delete, update as sa_update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from todo_api.models.todo import Todo
from todo_api.schemas.todo import TodoCreate

class TodoRepository:
    async def create(self, db: AsyncSession, todo_in: TodoCreate) -> Optional[Todo]:
        todo = Todo(todo=todo_in.todo, completed=todo_in.completed, user_id=todo_in.user_id)
        db.add(todo)
        await db.commit()
        # read back what the store persisted under the new id
        return await self.get(db, todo.id)

    async def list(self, db: AsyncSession):
        result = await db.execute(select(Todo).order_by(Todo.id.desc()))
        return result.scalars().all()

    async def get(self, db: AsyncSession, todo_id: int) -> Optional[Todo]:
        return await db.get(Todo, todo_id, populate_existing=True)

    async def update(self, db: AsyncSession, todo_id: int, fields: dict) -> Optional[Todo]:
        """Partial update of the given columns; the row is re-read afterwards."""
        stmt = sa_update(Todo).where(Todo.id == todo_id).values(**fields)
        await db.execute(stmt)
        await db.commit()
        return await self.get(db, todo_id)

    async def delete(self, db: AsyncSession, todo_id: int) -> bool:
        """Delete without an existence check; True when a row was removed."""
        res = await db.execute(sa_delete(Todo).where(Todo.id == todo_id))
        await db.commit()
        return (res.rowcount or 0) > 0
