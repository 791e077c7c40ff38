"""Declarative pizza orders: a base pizza plus modifiers in wrap order."""

import json
from pathlib import Path
from typing import Any, Self

from loguru import logger
from pydantic import BaseModel, Field, model_validator

from .enums import ModifierKind, PizzaStyle, Quantity, Size
from .models import MODIFIER_TYPES, PIZZA_STYLES, Pizza, Topping

TOPPING_KINDS = frozenset(
    kind for kind, cls in MODIFIER_TYPES.items() if issubclass(cls, Topping)
)


def wrap(pizza: Pizza, kind: ModifierKind | str, **params: Any) -> Pizza:
    """Wrap `pizza` in the modifier registered for `kind`."""
    cls = MODIFIER_TYPES[ModifierKind(kind)]
    logger.debug("Wrapping {} in {} ({})", type(pizza).__name__, cls.__name__, params)
    return cls(pizza, **params)


class BaseSpec(BaseModel):
    style: PizzaStyle
    size: Size

    def build(self) -> Pizza:
        return PIZZA_STYLES[self.style](self.size)


class ModifierSpec(BaseModel):
    kind: ModifierKind
    quantity: Quantity | None = None
    percentage: int | None = None

    @model_validator(mode="after")
    def check_params(self) -> Self:
        if self.kind == ModifierKind.DISCOUNT:
            if self.percentage is None:
                raise ValueError("discount requires a percentage")
        elif self.percentage is not None:
            raise ValueError(f"{self.kind} does not take a percentage")
        if self.quantity is not None and self.kind not in TOPPING_KINDS:
            raise ValueError(f"{self.kind} does not take a quantity")
        return self

    def params(self) -> dict[str, Any]:
        if self.kind == ModifierKind.DISCOUNT:
            return {"percentage": self.percentage}
        if self.quantity is not None:
            return {"quantity": self.quantity}
        return {}


class OrderSpec(BaseModel):
    name: str
    base: BaseSpec
    modifiers: list[ModifierSpec] = Field(default_factory=list)  # Innermost first

    def build(self) -> Pizza:
        """Wrap the base pizza with every modifier, innermost first."""
        pizza = self.base.build()
        for spec in self.modifiers:
            pizza = wrap(pizza, spec.kind, **spec.params())
        logger.debug("Built order {!r} with {} modifier(s)", self.name, len(self.modifiers))
        return pizza


class OrderBook(BaseModel):
    orders: list[OrderSpec] = Field(default_factory=list)

    def names(self) -> list[str]:
        return [order.name for order in self.orders]

    def get(self, name: str) -> OrderSpec:
        for order in self.orders:
            if order.name == name:
                return order
        raise KeyError(name)

    @classmethod
    def from_dict(cls, data: dict) -> "OrderBook":
        """Load an OrderBook from a dictionary (matching JSON structure)."""
        return cls(orders=[OrderSpec(**order) for order in data["orders"]])

    @classmethod
    def from_json_file(cls, path: str | Path) -> "OrderBook":
        """Load an OrderBook from a JSON file path."""
        with open(path, "r") as f:
            data = json.load(f)
        book = cls.from_dict(data)
        logger.debug("Loaded {} order(s) from {}", len(book.orders), path)
        return book
