from .menu import DeleteMenuItemResponse, MenuItem, MenuItemCreate, MenuItemUpdate, Taste
from .person import Person, PersonCreate, WorkType

__all__ = [
    "DeleteMenuItemResponse",
    "MenuItem",
    "MenuItemCreate",
    "MenuItemUpdate",
    "Person",
    "PersonCreate",
    "Taste",
    "WorkType",
]
