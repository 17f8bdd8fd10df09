from typing import Optional


class TodoAPIError(Exception):
    """Base error rendered as {"message": ..., "error": ...} with its status code."""

    status_code = 500

    def __init__(self, message: str, error: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.error = error

    def to_dict(self) -> dict:
        body = {"message": self.message}
        if self.error is not None:
            body["error"] = self.error
        return body


class InvalidInputError(TodoAPIError):
    status_code = 400


class TodoNotFoundError(TodoAPIError):
    status_code = 404

    def __init__(self, todo_id: str) -> None:
        super().__init__(f"Todo with id {todo_id} not found.")
        self.todo_id = todo_id


class StoreError(TodoAPIError):
    status_code = 500
