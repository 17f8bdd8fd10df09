from sqlalchemy import Boolean, Column, Integer, Text, text
from todo_api.database import Base

class Todo(Base):
    __tablename__ = "todos"
    # AUTOINCREMENT so ids of deleted rows are never handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    todo = Column(Text, nullable=False)
    completed = Column(Boolean, nullable=False, default=False, server_default=text("0"))
    user_id = Column("userId", Integer, nullable=False, default=1, server_default=text("1"))

    def __repr__(self) -> str:
        return f"<Todo id={self.id} completed={self.completed} userId={self.user_id}>"
