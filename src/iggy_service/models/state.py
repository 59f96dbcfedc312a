"""State document models used by the interpreter pipelines."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, Mapping


@dataclass(frozen=True, slots=True)
class StateDocument:
    """A parsed Terraform state snapshot together with where it came from."""

    source: Path
    data: Any


@dataclass(frozen=True, slots=True)
class StateResource:
    """One provisioned resource with its type, primary id and flat attributes."""

    handle: str
    type: str
    id: str
    attributes: Mapping[str, Any] = field(default_factory=dict)

    def attribute(self, key: str) -> Any:
        """Return the attribute stored under *key* or ``None`` when absent."""

        return self.attributes.get(key)


@dataclass(frozen=True, slots=True)
class StateModule:
    """Resources declared by a single state module, keyed by handle."""

    index: int
    resources: Dict[str, StateResource] = field(default_factory=dict)

    def __iter__(self) -> Iterator[StateResource]:
        return iter(self.resources.values())

    def __len__(self) -> int:
        return len(self.resources)
