"""Pizza layers: base pizzas and the modifiers that wrap them.

Every node answers the same read-only queries (description, cost, calories,
itemized breakdown, size). A chain is evaluated by walking inward once to
collect its layers, then folding them from the base pizza outward into a
Tally, so the result depends on the order the modifiers were applied.
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny

from .enums import ModifierKind, PizzaStyle, Quantity, Size
from .pricing import (
    BASE_CALORIES,
    BASE_PRICES,
    format_money,
    quantity_multiplier,
    size_multiplier,
)


class Tally(BaseModel):
    """Running totals for one evaluation of a chain."""

    size: Size
    description: str
    cost: float
    calories: int
    breakdown: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Evaluator contract
# ---------------------------------------------------------------------------


class Pizza(BaseModel):
    """A base pizza or a modifier wrapping one."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    def layers(self) -> list["Pizza"]:
        """Return the chain innermost first, ending with this node."""
        chain: list[Pizza] = []
        node: Pizza = self
        while isinstance(node, Modifier):
            chain.append(node)
            node = node.inner
        chain.append(node)
        chain.reverse()
        return chain

    def base(self) -> "BasePizza":
        node: Pizza = self
        while isinstance(node, Modifier):
            node = node.inner
        if not isinstance(node, BasePizza):
            raise TypeError(f"chain must end in a base pizza, got {type(node).__name__}")
        return node

    def evaluate(self) -> Tally:
        base, *modifiers = self.layers()
        if not isinstance(base, BasePizza):
            raise TypeError(f"chain must end in a base pizza, got {type(base).__name__}")
        tally = base.start()
        for modifier in modifiers:
            modifier.apply(tally)
        return tally

    def size(self) -> Size:
        return self.base().pizza_size

    def description(self) -> str:
        return self.evaluate().description

    def cost(self) -> float:
        return self.evaluate().cost

    def calories(self) -> int:
        return self.evaluate().calories

    def itemized_breakdown(self) -> list[str]:
        return self.evaluate().breakdown


# ---------------------------------------------------------------------------
# Base pizzas
# ---------------------------------------------------------------------------


class BasePizza(Pizza):
    """Unmodified pizza; price and calories depend only on its size."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    style: ClassVar[PizzaStyle]
    display_name: ClassVar[str]

    pizza_size: Size = Field(alias="size")

    def __init__(self, size: Size | str, **data: Any) -> None:
        super().__init__(size=size, **data)

    def start(self) -> Tally:
        name = f"{self.pizza_size} {self.display_name}"
        cost = BASE_PRICES[self.pizza_size]
        return Tally(
            size=self.pizza_size,
            description=name,
            cost=cost,
            calories=BASE_CALORIES[self.pizza_size],
            breakdown=[f"{name}: {format_money(cost)}"],
        )


class Margherita(BasePizza):
    style = PizzaStyle.MARGHERITA
    display_name = "Margherita Pizza"


class Pepperoni(BasePizza):
    style = PizzaStyle.PEPPERONI
    display_name = "Pepperoni Pizza"


class Veggie(BasePizza):
    style = PizzaStyle.VEGGIE
    display_name = "Veggie Pizza"


# ---------------------------------------------------------------------------
# Modifiers
# ---------------------------------------------------------------------------


class Modifier(Pizza):
    """Wraps exactly one pizza and adds its own effect on top of it."""

    kind: ClassVar[ModifierKind]

    inner: SerializeAsAny[Pizza] = Field(repr=False)

    def __init__(self, inner: Pizza, **data: Any) -> None:
        super().__init__(inner=inner, **data)

    def apply(self, tally: Tally) -> None:
        """Add this layer's effect to the totals of everything it wraps."""
        raise NotImplementedError()


class Topping(Modifier):
    """Topping priced per unit, scaled by pizza size and quantity."""

    topping_name: ClassVar[str]
    unit_price: ClassVar[float]
    unit_calories: ClassVar[int]

    quantity: Quantity = Quantity.SINGLE

    @property
    def label(self) -> str:
        if self.quantity == Quantity.SINGLE:
            return self.topping_name
        return f"{self.quantity} {self.topping_name}"

    def price_for(self, size: Size) -> float:
        return self.unit_price * size_multiplier(size) * quantity_multiplier(self.quantity)

    def apply(self, tally: Tally) -> None:
        delta = self.price_for(tally.size)
        tally.description += f", {self.label}"
        tally.cost += delta
        tally.calories += self.unit_calories * quantity_multiplier(self.quantity)
        tally.breakdown.append(f"{self.label}: +{format_money(delta)}")


class Cheese(Topping):
    kind = ModifierKind.CHEESE
    topping_name = "Cheese"
    unit_price = 1.5
    unit_calories = 100


class Mushrooms(Topping):
    kind = ModifierKind.MUSHROOMS
    topping_name = "Mushrooms"
    unit_price = 1.0
    unit_calories = 30


class Olives(Topping):
    kind = ModifierKind.OLIVES
    topping_name = "Olives"
    unit_price = 0.8
    unit_calories = 40


class FixedModifier(Modifier):
    """Modifier with a constant price and calorie effect."""

    cost_delta: ClassVar[float]
    calorie_delta: ClassVar[int]
    suffix: ClassVar[str]
    line_label: ClassVar[str]

    def apply(self, tally: Tally) -> None:
        tally.description += self.suffix
        tally.cost += self.cost_delta
        tally.calories += self.calorie_delta
        tally.breakdown.append(f"{self.line_label}: +{format_money(self.cost_delta)}")


class ExtraSauce(FixedModifier):
    kind = ModifierKind.EXTRA_SAUCE
    cost_delta = 0.5
    calorie_delta = 50
    suffix = ", Extra Sauce"
    line_label = "Extra Sauce"


class ThinCrust(FixedModifier):
    kind = ModifierKind.THIN_CRUST
    cost_delta = 0.0
    calorie_delta = -100
    suffix = " (Thin Crust)"
    line_label = "Thin Crust"


class StuffedCrust(FixedModifier):
    kind = ModifierKind.STUFFED_CRUST
    cost_delta = 3.0
    calorie_delta = 200
    suffix = " (Stuffed Crust)"
    line_label = "Stuffed Crust"


class MealDeal(FixedModifier):
    kind = ModifierKind.MEAL_DEAL
    cost_delta = 5.0
    calorie_delta = 600
    suffix = " + Drink + Fries (Meal Deal)"
    line_label = "Drink + Fries"


class Discount(Modifier):
    """Percentage off everything it wraps. Calories are left unchanged.

    The percentage is not range-checked: 150 yields a negative price and
    -10 a surcharge.
    """

    kind = ModifierKind.DISCOUNT

    percentage: int

    def __init__(self, inner: Pizza, percentage: int, **data: Any) -> None:
        super().__init__(inner, percentage=percentage, **data)

    def apply(self, tally: Tally) -> None:
        amount = tally.cost * (self.percentage / 100)
        tally.description += f" [{self.percentage}% OFF]"
        tally.cost -= amount
        tally.breakdown.append(f"Discount ({self.percentage}%): -{format_money(amount)}")


PIZZA_STYLES: dict[PizzaStyle, type[BasePizza]] = {
    cls.style: cls for cls in (Margherita, Pepperoni, Veggie)
}

MODIFIER_TYPES: dict[ModifierKind, type[Modifier]] = {
    cls.kind: cls
    for cls in (
        Cheese,
        Mushrooms,
        Olives,
        ExtraSauce,
        ThinCrust,
        StuffedCrust,
        MealDeal,
        Discount,
    )
}
