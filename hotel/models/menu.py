"""Menu item data model definitions."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .casting import scalar_to_str


class Taste(str, Enum):
    SWEET = "sweet"
    SPICY = "spicy"
    SOUR = "sour"


class MenuItemCreate(BaseModel):
    name: str
    price: float
    taste: Taste
    is_drink: bool = False
    ingredients: List[str] = Field(default_factory=list)
    num_sales: int = 0

    @field_validator("name", mode="before")
    def _cast_name(cls, value: Any) -> Any:
        return scalar_to_str(value)

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


class MenuItemUpdate(BaseModel):
    """Partial update; only the fields present in the request are written."""

    name: Optional[str] = None
    price: Optional[float] = None
    taste: Optional[Taste] = None
    is_drink: Optional[bool] = None
    ingredients: Optional[List[str]] = None
    num_sales: Optional[int] = None

    @field_validator("name", mode="before")
    def _cast_name(cls, value: Any) -> Any:
        return scalar_to_str(value)

    def to_update(self) -> Dict[str, Any]:
        # Explicit nulls are ignored so required fields cannot be cleared.
        return self.model_dump(mode="json", exclude_unset=True, exclude_none=True)


class MenuItem(MenuItemCreate):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="Database assigned identifier")
    num_sales: Union[int, float] = 0

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "MenuItem":
        return cls.model_validate({**document, "_id": str(document["_id"])})


class DeleteMenuItemResponse(BaseModel):
    message: str
    deletedItem: MenuItem
