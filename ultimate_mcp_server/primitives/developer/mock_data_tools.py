"""Mock data tool - sample users, products, orders, companies and addresses."""
from datetime import timedelta
from random import Random
from typing import Any, Callable

from ...tool_decorator import Tool
from ...handler_wrappers import HandlerError
from .. import _runtime
from .._helpers import iso_date
from . import CATEGORY

MAX_ROWS = 100

_FIRST_NAMES = ("Alice", "Bob", "Carol", "David", "Emma", "Frank", "Grace", "Hank", "Iris", "Jack")
_LAST_NAMES = ("Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis", "Wilson", "Martinez")
_COMPANIES = ("Acme Corp", "Initech", "Globex", "Hooli", "Pied Piper", "Vandelay Industries", "Sterling Cooper")
_PRODUCTS = ("Laptop", "Phone", "Tablet", "Monitor", "Keyboard", "Mouse", "Headphones", "Webcam", "Speaker", "Printer")
_STREETS = ("Main St", "Oak Ave", "Park Rd", "Elm St", "Maple Dr", "Cedar Ln", "Pine Way", "Lake Blvd")
_CITIES = ("New York", "Los Angeles", "Chicago", "Houston", "Phoenix", "Philadelphia", "San Antonio", "San Diego")
_STATES = ("NY", "CA", "IL", "TX", "AZ", "PA", "TX", "CA")
_ORDER_STATUSES = ("pending", "shipped", "delivered", "cancelled")
_INDUSTRIES = ("Tech", "Finance", "Healthcare", "Retail")


# ------------------------------------------------------------------------------
# Row factories
# ------------------------------------------------------------------------------
# Each factory builds one row from the shared random source. Integer ranges are
# half-open, as with Random.randrange().
# ------------------------------------------------------------------------------
def _user(rng: Random) -> dict[str, Any]:
    return {
        "id": rng.randrange(1000, 9999),
        "name": f"{rng.choice(_FIRST_NAMES)} {rng.choice(_LAST_NAMES)}",
        "email": f"{rng.choice(_FIRST_NAMES).lower()}.{rng.choice(_LAST_NAMES).lower()}@email.com",
        "age": rng.randrange(18, 65),
        "company": rng.choice(_COMPANIES),
        "phone": f"+1-{rng.randrange(200, 999)}-{rng.randrange(100, 999)}-{rng.randrange(1000, 9999)}",
    }


def _product(rng: Random) -> dict[str, Any]:
    return {
        "id": rng.randrange(100, 999),
        "name": rng.choice(_PRODUCTS),
        "price": rng.randrange(10, 999) + 0.99,
        "sku": f"SKU-{rng.randrange(10000, 99999)}",
        "stock": rng.randrange(0, 500),
        "category": "Electronics",
    }


def _order(rng: Random) -> dict[str, Any]:
    placed = _runtime.utc_now() - timedelta(days=rng.randrange(0, 30))
    return {
        "id": f"ORD-{rng.randrange(10000, 99999)}",
        "customer": f"{rng.choice(_FIRST_NAMES)} {rng.choice(_LAST_NAMES)}",
        "total": rng.randrange(20, 2000) + 0.99,
        "status": rng.choice(_ORDER_STATUSES),
        "date": iso_date(placed),
    }


def _company(rng: Random) -> dict[str, Any]:
    return {
        "name": rng.choice(_COMPANIES),
        "industry": rng.choice(_INDUSTRIES),
        "employees": rng.randrange(10, 10000),
        "revenue": f"${rng.randrange(1, 500)}M",
        "founded": rng.randrange(1980, 2020),
    }


def _address(rng: Random) -> dict[str, Any]:
    return {
        "street": f"{rng.randrange(1, 9999)} {rng.choice(_STREETS)}",
        "city": rng.choice(_CITIES),
        "state": rng.choice(_STATES),
        "zip": str(rng.randrange(10000, 99999)),
        "country": "USA",
    }


MOCK_FACTORIES: dict[str, Callable[[Random], dict[str, Any]]] = {
    "users": _user,
    "products": _product,
    "orders": _order,
    "companies": _company,
    "addresses": _address,
}


@Tool(
    "generate_mock_data",
    CATEGORY,
    "Generate realistic mock/test data",
    {
        "type": "object",
        "properties": {
            "type": {"type": "string", "enum": list(MOCK_FACTORIES)},
            "count": {"type": "number", "default": 5},
        },
        "required": ["type"],
    },
)
def generate_mock_data(type: str, count: int = 5) -> dict[str, Any]:
    factory = MOCK_FACTORIES.get(type)
    if factory is None:
        raise HandlerError(f"Unknown data type: {type}", hint=f"Use one of: {', '.join(MOCK_FACTORIES)}")

    rng = _runtime.rng()
    rows = max(int(min(count, MAX_ROWS)), 0)
    return {"type": type, "data": [factory(rng) for _ in range(rows)]}
