from enum import StrEnum


class Size(StrEnum):
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"


class Quantity(StrEnum):
    SINGLE = "Single"
    DOUBLE = "Double"
    EXTRA = "Extra"


class PizzaStyle(StrEnum):
    MARGHERITA = "margherita"
    PEPPERONI = "pepperoni"
    VEGGIE = "veggie"


class ModifierKind(StrEnum):
    CHEESE = "cheese"
    MUSHROOMS = "mushrooms"
    OLIVES = "olives"
    EXTRA_SAUCE = "extra-sauce"
    THIN_CRUST = "thin-crust"
    STUFFED_CRUST = "stuffed-crust"
    MEAL_DEAL = "meal-deal"
    DISCOUNT = "discount"
