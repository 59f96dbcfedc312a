"""Generated control models consumed by the control execution engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

EXIST = "exist"
EQ = "eq"

AssertionTuple = Tuple[str, str, str, Optional[str], Any]


@dataclass(frozen=True, slots=True)
class Assertion:
    """A single check against the resource named by the enclosing describe."""

    qualifier_type: str
    qualifier_id: str
    name: str
    operator: Optional[str] = None
    expected: Any = None

    @property
    def is_existence(self) -> bool:
        return self.name == EXIST and self.operator is None

    def as_tuple(self) -> AssertionTuple:
        return (self.qualifier_type, self.qualifier_id, self.name, self.operator, self.expected)


@dataclass(slots=True)
class Describe:
    """Assertion group bound to one ``(type, id)`` qualifier."""

    qualifier_type: str
    qualifier_id: str
    assertions: List[Assertion] = field(default_factory=list)

    def add_existence(self) -> None:
        self.assertions.append(Assertion(self.qualifier_type, self.qualifier_id, EXIST))

    def add_equality(self, attribute: str, value: Any) -> None:
        self.assertions.append(
            Assertion(self.qualifier_type, self.qualifier_id, attribute, EQ, value)
        )


@dataclass(slots=True)
class GeneratedControl:
    """A compliance control generated for one recognized resource."""

    id: str
    title: str
    descriptions: Dict[str, str]
    describe: Describe
    impact: float = 1.0

    @property
    def description(self) -> str:
        return self.descriptions.get("default", "")

    @property
    def assertions(self) -> List[Assertion]:
        return self.describe.assertions
