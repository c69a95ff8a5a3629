"""
Example 03: Custom Validator

This example demonstrates plugging in a validator that is not a Pydantic
model by implementing the Validator protocol.
"""

from path_mapper import Accepted, PathMapper, Rejected


class PositiveTotal:
    """Accepts orders whose total is positive"""

    def validate(self, candidate):
        total = candidate.get("total")
        if isinstance(total, (int, float)) and total > 0:
            return Accepted(candidate)
        return Rejected(({"loc": ("total",), "msg": "total must be positive"},))


def main():
    mapper = PathMapper(
        {"order_id": "order.id", "total": {"path": "order.amount.value", "default": 0}},
        PositiveTotal(),
    )

    print(mapper.map_one({"order": {"id": "A1", "amount": {"value": 12.5}}}))
    print(mapper.map_one({"order": {"id": "A2"}}))


if __name__ == "__main__":
    main()
