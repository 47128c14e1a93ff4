"""
Test data generators for JSON writing benchmarks.

Creates various document shapes as plain Python structures, plus a
converter into jsonkit builder trees so every library writes the same data:
- Different sizes (small/large)
- Different complexity levels (flat/nested/mixed)
- String-heavy content that exercises the escaper
"""

import random
import string
from typing import Any

import jsonkit

# Constants for random data generation
_INT_TYPE = 1
_FLOAT_TYPE = 2
_STRING_TYPE = 3
_BOOL_TYPE = 4
_NULL_TYPE = 5
_ESCAPE_PROBABILITY = 0.3

DATA_TYPES = [
    "small_object",
    "large_object",
    "mixed_array",
    "nested_structure",
    "string_heavy",
]


def generate_test_data(data_type: str) -> Any:
    """Generates a Python document based on specified type."""
    generators = {
        "small_object": _generate_small_object,
        "large_object": _generate_large_object,
        "mixed_array": _generate_mixed_array,
        "nested_structure": _generate_nested_structure,
        "string_heavy": _generate_string_heavy,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return generators[data_type]()


def to_builder(data: Any) -> Any:
    """Converts dicts and lists into JsonObject and JsonArray trees."""
    if isinstance(data, dict):
        obj = jsonkit.JsonObject()
        for key, value in data.items():
            obj.put(key, to_builder(value))
        return obj
    if isinstance(data, list):
        array = jsonkit.JsonArray()
        for value in data:
            array.add(to_builder(value))
        return array
    return data


def _generate_small_object() -> dict[str, Any]:
    """Generates a small object (< 1KB) with basic key-value pairs."""
    return {
        "id": 12345,
        "name": "Alice Johnson",
        "email": "alice@example.com",
        "active": True,
        "balance": 1234.56,
        "metadata": {"created": "2024-01-15T10:30:00Z", "source": "api"},
    }


def _generate_large_object() -> dict[str, Any]:
    """Generates a large object (> 10KB) with many fields."""
    return {
        "user_id": random.randint(1000000, 9999999),
        "profile": {
            "first_name": _random_string(10),
            "last_name": _random_string(12),
            "email": f"{_random_string(8)}@{_random_string(6)}.com",
            "address": {
                "street": f"{random.randint(1, 9999)} {_random_string(8)} St",
                "city": _random_string(12),
                "zip": f"{random.randint(10000, 99999)}",
                "country": "US",
            },
            "notifications": {
                "email": random.choice([True, False]),
                "sms": random.choice([True, False]),
            },
        },
        # Generate transaction history
        "transactions": [
            {
                "id": f"txn_{i:06d}",
                "amount": round(random.uniform(1.0, 1000.0), 2),
                "currency": random.choice(["USD", "EUR", "GBP", "JPY"]),
                "description": f"Payment for {_random_string(20)}",
                "status": random.choice(["completed", "pending", "failed"]),
            }
            for i in range(50)
        ],
        # Generate activity log
        "activity_log": [
            {
                "action": random.choice(
                    ["login", "logout", "purchase", "view", "update"]
                ),
                "ip_address": ".".join(
                    str(random.randint(1, 255)) for _ in range(4)
                ),
                "user_agent": f"Mozilla/5.0 ({_random_string(20)})",
            }
            for i in range(30)
        ],
    }


def _generate_mixed_array() -> list[Any]:
    """Generates a large array with mixed data types."""
    array: list[Any] = []

    for i in range(200):
        choice = random.randint(1, 6)
        if choice == _INT_TYPE:
            array.append(random.randint(-1000, 1000))
        elif choice == _FLOAT_TYPE:
            array.append(round(random.uniform(-100.0, 100.0), 3))
        elif choice == _STRING_TYPE:
            array.append(_random_string(random.randint(5, 30)))
        elif choice == _BOOL_TYPE:
            array.append(random.choice([True, False]))
        elif choice == _NULL_TYPE:
            array.append(None)
        else:
            array.append(
                {
                    "index": i,
                    "value": _random_string(10),
                    "score": round(random.uniform(0, 100), 2),
                }
            )

    return array


def _generate_nested_structure() -> dict[str, Any]:
    """Generates deeply nested structure."""

    def create_nested_dict(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"value": _random_string(10)}

        return {
            "level": depth,
            "data": _random_string(15),
            "items": [create_nested_dict(depth - 1) for _ in range(3)],
            "nested": create_nested_dict(depth - 1),
        }

    return create_nested_dict(6)


def _generate_string_heavy() -> dict[str, Any]:
    """Generates strings full of characters that need escaping."""

    def create_escaped_string() -> str:
        chars = []
        for _ in range(50):
            if random.random() < _ESCAPE_PROBABILITY:
                chars.append(random.choice(['"', "\\", "\n", "\r", "\t"]))
            else:
                chars.append(
                    random.choice(string.ascii_letters + string.digits + " ")
                )
        return "".join(chars)

    return {
        "strings": [create_escaped_string() for _ in range(100)],
        "unicode": [
            "".join(chr(random.randint(0x00A0, 0x2FFF)) for _ in range(20))
            for _ in range(50)
        ],
        "paths": {
            f"key_{i}": f"C:\\Users\\{_random_string(8)}\\file_{i}.txt"
            for i in range(20)
        },
    }


def _random_string(length: int) -> str:
    """Generates random string of specified length."""
    return "".join(random.choices(string.ascii_letters, k=length))
