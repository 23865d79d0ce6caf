"""Employee representation exposed over the HTTP API."""

from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# Stored as a 32-bit integer column.
Int32 = Annotated[int, Field(ge=-(2**31), le=2**31 - 1)]


class Employee(BaseModel):
    """Flat employee representation with camelCase JSON keys.

    ``id`` and ``created_at`` are assigned by the server; values sent by a
    client are accepted but ignored on write.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int | None = None
    first_name: str | None = None
    middle_name: str | None = None
    last_name_father: str | None = None
    last_name_mother: str | None = None
    age: Int32 | None = None
    gender: str | None = None
    birth_date: date | None = None
    position: str | None = None
    created_at: datetime | None = None
    active: bool = False

    @field_validator("active", mode="before")
    @classmethod
    def _null_active_is_false(cls, value: Any) -> Any:
        return False if value is None else value


class EmployeeCreate(Employee):
    """Representation accepted on creation; the searchable name parts are required."""

    first_name: str
    last_name_father: str
