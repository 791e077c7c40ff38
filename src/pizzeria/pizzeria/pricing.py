"""Price and calorie tables shared by every pizza layer."""

from .enums import Quantity, Size

BASE_PRICES: dict[Size, float] = {
    Size.SMALL: 8.0,
    Size.MEDIUM: 12.0,
    Size.LARGE: 16.0,
}

BASE_CALORIES: dict[Size, int] = {
    Size.SMALL: 800,
    Size.MEDIUM: 1200,
    Size.LARGE: 1600,
}

# Per-unit topping prices scale with the pizza size; calories do not.
SIZE_MULTIPLIERS: dict[Size, float] = {
    Size.SMALL: 1.0,
    Size.MEDIUM: 1.5,
    Size.LARGE: 2.0,
}

QUANTITY_MULTIPLIERS: dict[Quantity, int] = {
    Quantity.SINGLE: 1,
    Quantity.DOUBLE: 2,
    Quantity.EXTRA: 3,
}


def size_multiplier(size: Size) -> float:
    """Topping price factor for a pizza size (1.0 when the size is unknown)."""
    return SIZE_MULTIPLIERS.get(size, 1.0)


def quantity_multiplier(quantity: Quantity) -> int:
    return QUANTITY_MULTIPLIERS[quantity]


def format_money(amount: float) -> str:
    return f"${amount:.2f}"
