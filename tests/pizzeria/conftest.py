"""Shared pytest fixtures for pizzeria tests."""

from pathlib import Path

import pytest

from pizzeria.enums import Size
from pizzeria.models import Margherita
from pizzeria.orders import OrderBook

# Path to the demo order book relative to project root
ORDERS_JSON_PATH = Path(__file__).resolve().parents[2] / "orders" / "demo-orders.json"


@pytest.fixture
def medium_margherita() -> Margherita:
    """A plain medium Margherita (12.00, 1200 kcal)."""
    return Margherita(Size.MEDIUM)


@pytest.fixture
def order_book() -> OrderBook:
    """Load the demo order book from JSON."""
    return OrderBook.from_json_file(ORDERS_JSON_PATH)
