"""Plain-text receipt for a finished pizza order."""

from .models import Pizza
from .pricing import format_money

RULE_WIDTH = 60


def render_receipt(pizza: Pizza) -> str:
    """Render description, itemized breakdown and totals for `pizza`."""
    lines = [
        "=" * RULE_WIDTH,
        "🍕 PIZZA ORDER",
        "=" * RULE_WIDTH,
        "",
        "Description:",
        pizza.description(),
        "",
        "Itemized Breakdown:",
    ]
    lines.extend(f"  • {item}" for item in pizza.itemized_breakdown())
    lines += [
        "",
        "-" * RULE_WIDTH,
        f"Total Cost: {format_money(pizza.cost())}",
        f"Total Calories: {pizza.calories()} kcal",
        "=" * RULE_WIDTH,
    ]
    return "\n".join(lines)
