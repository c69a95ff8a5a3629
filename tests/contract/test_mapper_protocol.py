"""Contract tests for mapper and validator protocol compliance."""

from __future__ import annotations

from typing import Any

from typing_extensions import TypedDict

from path_mapper.core.validation import Accepted, Rejected, Validator
from path_mapper.mapping.builder import mapping
from path_mapper.mapping.mapper import PathMapper
from path_mapper.mapping.protocol import Mapper
from path_mapper.mapping.result import Failure, Success


class Item(TypedDict):
    sku: str
    qty: int


class EvenQuantity:
    def validate(self, candidate: dict[str, Any]) -> Accepted | Rejected:
        if candidate.get("qty", 0) % 2 == 0:
            return Accepted(candidate)
        return Rejected(({"loc": ("qty",), "msg": "odd quantity", "code": "odd"},))


class TestPathMapperProtocol:
    def test_implements_mapper_protocol(self) -> None:
        mapper = PathMapper({"sku": "sku", "qty": "qty"}, Item)
        assert isinstance(mapper, Mapper)

    def test_bound_plan_implements_mapper_protocol(self) -> None:
        mapper = mapping().field("sku").field("qty").build().bind(Item)
        assert isinstance(mapper, Mapper)

    def test_results_are_exactly_one_variant(self) -> None:
        mapper = PathMapper({"sku": "sku", "qty": "qty"}, Item)
        for result in mapper.map_many([{"sku": "A", "qty": 1}, {"sku": "B"}]):
            assert isinstance(result, (Success, Failure))
            if isinstance(result, Success):
                assert result.issues is None
            else:
                assert result.value is None
                assert result.issues


class TestCustomValidatorProtocol:
    def test_implements_validator_protocol(self) -> None:
        assert isinstance(EvenQuantity(), Validator)

    def test_custom_issue_records_pass_through(self) -> None:
        mapper = PathMapper({"qty": "order.qty"}, EvenQuantity())
        assert mapper.map_one({"order": {"qty": 4}}) == Success({"qty": 4})
        assert mapper.map_one({"order": {"qty": 3}}) == Failure(
            [{"loc": ("qty",), "msg": "odd quantity", "code": "odd"}]
        )
