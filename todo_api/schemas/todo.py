import re
from enum import Enum
from typing import Annotated, Any, List, Optional, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    StringConstraints,
    ValidationError,
    field_validator,
)

NonEmptyStr = Annotated[str, StringConstraints(strict=True, min_length=1)]

UPDATABLE_FIELDS = frozenset({"todo", "completed"})

_TRUE_STRINGS = frozenset({"true", "1"})
_FALSE_STRINGS = frozenset({"false", "0"})

_INTEGER_ID = re.compile(r"[+-]?\d+")

# SQLite INTEGER is a signed 64-bit value
SQLITE_INT_MIN = -(2 ** 63)
SQLITE_INT_MAX = 2 ** 63 - 1


class InvalidInput(str, Enum):
    INVALID_DATA = "Invalid data provided."
    NO_FIELDS = "No fields to update provided."


def coerce_completed(value: Any) -> bool:
    """
    Turn an incoming ``completed`` value into a bool.

    Accepted: JSON booleans, the integers 0 and 1, and the strings
    "true"/"false"/"1"/"0" (case and surrounding whitespace ignored).
    Everything else, null included, raises ValueError.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise ValueError(f"cannot interpret {value!r} as a completed flag")


def parse_todo_id(raw: str) -> Optional[int]:
    """Integer value of a path id, or None when it is not a plain integer."""
    if _INTEGER_ID.fullmatch(raw) is None:
        return None
    return int(raw)


def storable_id(raw: str) -> Optional[int]:
    """
    The id to look up in the store, or None when no row can carry it.

    Non-integer ids and integers outside SQLite's range simply match nothing.
    """
    todo_id = parse_todo_id(raw)
    if todo_id is None or not SQLITE_INT_MIN <= todo_id <= SQLITE_INT_MAX:
        return None
    return todo_id


class TodoBase(BaseModel):
    todo: NonEmptyStr


class TodoCreate(TodoBase):
    completed: StrictBool = False
    user_id: StrictInt = Field(default=1, validation_alias=AliasChoices("userId", "user_id"))


class TodoUpdate(BaseModel):
    todo: Optional[StrictStr] = None
    completed: Optional[bool] = None

    @field_validator("todo", mode="before")
    @classmethod
    def _todo_not_null(cls, value: Any) -> Any:
        # defaults are not validated, so this only sees values sent by the client
        if value is None:
            raise ValueError("todo must not be null")
        return value

    @field_validator("completed", mode="before")
    @classmethod
    def _coerce_completed(cls, value: Any) -> bool:
        return coerce_completed(value)

    def changes(self) -> dict:
        """Only the fields present in the request body."""
        return self.model_dump(include=self.model_fields_set)


class TodoOut(TodoBase):
    id: int
    todo: str
    completed: bool
    user_id: int = Field(
        validation_alias=AliasChoices("userId", "user_id"),
        serialization_alias="userId",
    )
    model_config = ConfigDict(from_attributes=True)


class TodoList(BaseModel):
    todos: List[TodoOut]
    total: int
    skip: int = 0
    limit: int


class TodoDeleted(BaseModel):
    # null when the path id is not an integer at all
    id: Optional[int]
    is_deleted: bool = Field(
        default=True,
        validation_alias=AliasChoices("isDeleted", "is_deleted"),
        serialization_alias="isDeleted",
    )


def parse_create(payload: Any) -> Union[TodoCreate, InvalidInput]:
    if not isinstance(payload, dict):
        return InvalidInput.INVALID_DATA
    try:
        return TodoCreate.model_validate(payload)
    except ValidationError:
        return InvalidInput.INVALID_DATA


def parse_update(payload: Any) -> Union[TodoUpdate, InvalidInput]:
    # a request without a body carries no fields at all
    if payload is None:
        return InvalidInput.NO_FIELDS
    if not isinstance(payload, dict):
        return InvalidInput.INVALID_DATA
    if not UPDATABLE_FIELDS.intersection(payload):
        return InvalidInput.NO_FIELDS
    try:
        return TodoUpdate.model_validate(payload)
    except ValidationError:
        return InvalidInput.INVALID_DATA
