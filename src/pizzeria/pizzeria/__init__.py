"""Pizza order pricing built from composable modifier layers."""

from .enums import ModifierKind, PizzaStyle, Quantity, Size
from .models import (
    BasePizza,
    Cheese,
    Discount,
    ExtraSauce,
    Margherita,
    MealDeal,
    Modifier,
    Mushrooms,
    Olives,
    Pepperoni,
    Pizza,
    StuffedCrust,
    Tally,
    ThinCrust,
    Veggie,
)
from .orders import OrderBook, OrderSpec, wrap
from .receipt import render_receipt

__all__ = [
    "BasePizza",
    "Cheese",
    "Discount",
    "ExtraSauce",
    "Margherita",
    "MealDeal",
    "Modifier",
    "ModifierKind",
    "Mushrooms",
    "Olives",
    "OrderBook",
    "OrderSpec",
    "Pepperoni",
    "Pizza",
    "PizzaStyle",
    "Quantity",
    "Size",
    "StuffedCrust",
    "Tally",
    "ThinCrust",
    "Veggie",
    "render_receipt",
    "wrap",
]
