"""
Example 02: Builder DSL

This example demonstrates declaring a reusable mapping plan with the fluent
builder and applying it to a batch of payloads.
"""

from path_mapper import mapping
from typing_extensions import TypedDict


class TeamLead(TypedDict):
    """Flattened team lead record"""
    team: str
    lead: str
    email: str


def main():
    plan = (
        mapping()
        .field("team", "teams[0].name")
        .field("lead", "teams[0].lead.name", default="Vacant")
        .field("email", "teams[0].lead.email", default="", transform=str.lower)
        .build()
    )
    mapper = plan.bind(TeamLead)

    payloads = [
        {"teams": [{"name": "Backend", "lead": {"name": "Dave", "email": "DAVE@CO.COM"}}]},
        {"teams": [{"name": "Frontend"}]},
        {"teams": []},
    ]

    for payload, result in zip(payloads, mapper.map_many(payloads)):
        if result.is_error:
            print(f"{payload} -> {len(result.issues)} issue(s)")
        else:
            print(f"{payload} -> {result.value}")


if __name__ == "__main__":
    main()
