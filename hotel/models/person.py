"""Person data model definitions."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .casting import scalar_to_str


class WorkType(str, Enum):
    CHEF = "chef"
    WAITER = "waiter"
    MANAGER = "manager"


class PersonCreate(BaseModel):
    """Fields accepted when registering a staff member."""

    name: str
    age: Optional[int] = None
    work: WorkType
    mobile: int
    email: str = Field(..., description="Unique across all staff records")
    address: Optional[str] = None

    @field_validator("name", "email", "address", mode="before")
    def _cast_text(cls, value: Any) -> Any:
        return scalar_to_str(value)

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class Person(PersonCreate):
    """A stored staff record.

    Older records may carry fractional ages and lack ``work`` or ``mobile``,
    so the read model is looser than the one used for registration.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="Database assigned identifier")
    age: Optional[Union[int, float]] = None
    work: Optional[WorkType] = None
    mobile: Optional[Union[int, float]] = None

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "Person":
        return cls.model_validate({**document, "_id": str(document["_id"])})
