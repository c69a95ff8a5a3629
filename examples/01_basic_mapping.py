"""
Example 01: Basic Mapping

This example demonstrates extracting fields from a nested payload with
defaults and transforms, then validating them with a Pydantic model.
"""

from path_mapper import map_and_validate
from pydantic import BaseModel, EmailStr


class User(BaseModel):
    """Flat user model"""
    name: str
    email: EmailStr
    age: int


def main():
    payload = {"user": {"name": "alice", "age": "25"}}

    mapping = {
        "name": {"path": "user.name", "default": "Unknown", "transform": str.title},
        "email": {"path": "user.email", "default": "email@gmail.com"},
        "age": {"path": "user.age", "default": 0, "transform": int},
    }

    print("=== Valid payload ===")
    result = map_and_validate(payload, mapping, User)
    print(f"is_error: {result.is_error}")
    print(f"value: {result.value}")

    print("\n=== Invalid payload ===")
    result = map_and_validate({"user": {"name": "bob", "age": "x"}}, {
        "name": "user.name",
        "age": "user.age",
        "email": {"path": "user.email", "default": "not-an-email"},
    }, User)
    print(f"is_error: {result.is_error}")
    for issue in result.issues:
        print(f"  {issue['loc']}: {issue['msg']}")


if __name__ == "__main__":
    main()
