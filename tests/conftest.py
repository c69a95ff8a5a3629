"""Shared test fixtures."""

from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def user_payload() -> dict[str, Any]:
    """A single user nested under 'user'."""
    return {"user": {"name": "Alice", "age": 25}}


@pytest.fixture
def users_payload() -> dict[str, Any]:
    """A list of users under 'users'."""
    return {
        "users": [
            {"name": "Bob", "age": 30},
            {"name": "Carol", "age": 28},
        ]
    }


@pytest.fixture
def company_payload() -> dict[str, Any]:
    """Deeply nested departments, teams and leads."""
    return {
        "company": {
            "departments": [
                {
                    "name": "Engineering",
                    "teams": [
                        {
                            "name": "Backend",
                            "lead": {"name": "Dave", "email": "dave@company.com"},
                        },
                        {
                            "name": "Frontend",
                            "lead": {"name": "Eve", "email": "eve@company.com"},
                        },
                    ],
                }
            ]
        }
    }
