from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any


class CategoryType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


def _check_type(value: str) -> str:
    try:
        return CategoryType(value).value
    except ValueError:
        raise ValueError(f"Invalid category type: {value!r}") from None


@dataclass(frozen=True)
class Category:
    id: Any             # server-assigned, opaque
    name: str
    type: str           # 'income' | 'expense'

    @classmethod
    def from_json(cls, data: dict) -> "Category":
        """Build a Category from an API payload. Accepts `id` or `_id`."""
        if not isinstance(data, dict):
            raise ValueError(f"Category payload must be an object, got {type(data).__name__}.")
        cat_id = data.get("id", data.get("_id"))
        if cat_id is None:
            raise ValueError("Category payload has no id.")
        return cls(
            id=cat_id,
            name=data.get("name", ""),
            type=_check_type(data.get("type")),
        )


@dataclass(frozen=True)
class CreateDraft:
    """Unsaved form state for a category that does not exist yet."""

    name: str = ""
    type: str = CategoryType.EXPENSE.value

    def __post_init__(self):
        object.__setattr__(self, "type", _check_type(self.type))

    def body(self) -> dict:
        return {"name": self.name, "type": self.type}

    def with_values(self, name: str | None = None, type_: str | None = None):
        return replace(
            self,
            name=self.name if name is None else name,
            type=self.type if type_ is None else type_,
        )


@dataclass(frozen=True)
class EditDraft:
    """Unsaved form state for an existing category, keyed by its id."""

    id: Any
    name: str
    type: str

    def __post_init__(self):
        object.__setattr__(self, "type", _check_type(self.type))

    @classmethod
    def from_category(cls, category: Category) -> "EditDraft":
        return cls(id=category.id, name=category.name, type=category.type)

    def body(self) -> dict:
        return {"name": self.name, "type": self.type}

    def with_values(self, name: str | None = None, type_: str | None = None):
        return replace(
            self,
            name=self.name if name is None else name,
            type=self.type if type_ is None else type_,
        )


Draft = CreateDraft | EditDraft
