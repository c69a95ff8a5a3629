"""Integration tests: normalizing API payloads through the public API."""

from __future__ import annotations

from datetime import date
from typing import Any

import pytest
from pydantic import BaseModel, EmailStr

import path_mapper
from path_mapper import (
    Failure,
    MapperConfig,
    MappingEntry,
    PathMapper,
    Success,
    ValidationRejectedError,
    map_and_validate,
    mapping,
)


class Customer(BaseModel):
    id: int
    full_name: str
    email: EmailStr
    signup_date: date
    tags: list[str]
    vip: bool


def _full_name(person: dict[str, Any]) -> str:
    return f"{person['first']} {person['last']}"


def _lower(value: Any) -> Any:
    return value.lower() if isinstance(value, str) else value


def _split_labels(labels: str) -> list[str]:
    return [label for label in labels.split(",") if label]


@pytest.fixture
def crm_payload() -> dict[str, Any]:
    return {
        "data": {
            "customer": {
                "id": "1001",
                "person": {"first": "Ada", "last": "Lovelace"},
                "contacts": [
                    {"type": "email", "value": "ADA@EXAMPLE.COM"},
                    {"type": "phone", "value": "+44 20 0000 0000"},
                ],
                "created": "2024-03-01",
                "labels": "math,engines",
            }
        }
    }


@pytest.fixture
def customer_mapping() -> dict[str, Any]:
    return {
        "id": "data.customer.id",
        "full_name": MappingEntry("data.customer.person", transform=_full_name),
        "email": {"path": "data.customer.contacts[0].value", "transform": _lower},
        "signup_date": "data.customer.created",
        "tags": {"path": "data.customer.labels", "default": "", "transform": _split_labels},
        "vip": {"path": "data.customer.flags.vip", "default": False},
    }


@pytest.mark.integration
class TestPayloadNormalization:
    def test_exports(self) -> None:
        for name in path_mapper.__all__:
            assert hasattr(path_mapper, name)

    def test_full_payload(self, crm_payload: dict, customer_mapping: dict) -> None:
        result = map_and_validate(crm_payload, customer_mapping, Customer)
        assert isinstance(result, Success)
        customer = result.unwrap()
        assert customer.id == 1001
        assert customer.full_name == "Ada Lovelace"
        assert customer.email == "ada@example.com"
        assert customer.signup_date == date(2024, 3, 1)
        assert customer.tags == ["math", "engines"]
        assert customer.vip is False

    def test_sparse_payload_reports_every_issue(self, customer_mapping: dict) -> None:
        sparse = {"data": {"customer": {"id": "x", "person": {"first": "A", "last": "B"}}}}
        result = map_and_validate(sparse, customer_mapping, Customer)
        assert isinstance(result, Failure)
        locs = [issue["loc"] for issue in result.issues]
        assert ("id",) in locs
        assert ("email",) in locs
        assert ("signup_date",) in locs
        with pytest.raises(ValidationRejectedError) as exc_info:
            result.unwrap()
        assert exc_info.value.issues == result.issues

    def test_batch_with_builder(self) -> None:
        plan = (
            mapping()
            .field("id", "customer.id")
            .field("full_name", "customer.name")
            .field("email", "customer.email")
            .field("signup_date", "customer.created")
            .field("tags", "customer.tags", default=[])
            .field("vip", "customer.vip", default=False)
            .build()
        )
        mapper = plan.bind(Customer)
        results = mapper.map_many(
            [
                {
                    "customer": {
                        "id": 1,
                        "name": "Grace",
                        "email": "grace@example.com",
                        "created": "2023-12-09",
                        "vip": True,
                    }
                },
                {"customer": {"id": 2, "name": "Linus", "email": "not-an-email"}},
            ]
        )
        assert [r.is_error for r in results] == [False, True]
        assert results[0].value.vip is True

    def test_strict_mapper_rejects_placeholder_entry(self, customer_mapping: dict) -> None:
        customer_mapping["notes"] = None
        with pytest.raises(path_mapper.MappingDeclarationError):
            PathMapper(customer_mapping, Customer, MapperConfig(strict=True))
