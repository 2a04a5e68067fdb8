"""
Closed tagged union of parsed JSON values.

Each variant is an immutable record; arrays and objects own their children.
``to_python()`` converts any value tree into plain Python objects.
"""

from dataclasses import dataclass
from dataclasses import field
from typing import TypeAlias

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Recursive plain-Python rendering of a value tree
PythonValue: TypeAlias = (
    "str | int | float | bool | None | dict[str, PythonValue] | list[PythonValue]"
)


@dataclass(frozen=True, slots=True)
class JsonString:
    value: str

    def to_python(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class JsonInteger:
    """Signed 64-bit integer."""

    value: int

    def __post_init__(self) -> None:
        if not INT64_MIN <= self.value <= INT64_MAX:
            raise OverflowError(f"{self.value} is outside the 64-bit range")

    def to_python(self) -> int:
        return self.value


@dataclass(frozen=True, slots=True)
class JsonFloat:
    value: float

    def to_python(self) -> float:
        return self.value


@dataclass(frozen=True, slots=True)
class JsonBoolean:
    value: bool

    def to_python(self) -> bool:
        return self.value


@dataclass(frozen=True, slots=True)
class JsonNull:
    def to_python(self) -> None:
        return None


@dataclass(frozen=True, slots=True)
class JsonArray:
    items: tuple["Value", ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> "Value":
        return self.items[index]

    def to_python(self) -> list[PythonValue]:
        return [item.to_python() for item in self.items]


@dataclass(frozen=True, slots=True)
class JsonObject:
    """
    Mapping from string keys to values.

    Backed by ``dict``: when a key repeats, the last value wins and the key
    keeps the position of its first occurrence.
    """

    members: dict[str, "Value"] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.members)

    def __getitem__(self, key: str) -> "Value":
        return self.members[key]

    def __contains__(self, key: object) -> bool:
        return key in self.members

    def to_python(self) -> dict[str, PythonValue]:
        return {key: value.to_python() for key, value in self.members.items()}


Value: TypeAlias = (
    JsonString
    | JsonInteger
    | JsonFloat
    | JsonBoolean
    | JsonNull
    | JsonArray
    | JsonObject
)

__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "JsonArray",
    "JsonBoolean",
    "JsonFloat",
    "JsonInteger",
    "JsonNull",
    "JsonObject",
    "JsonString",
    "PythonValue",
    "Value",
]
