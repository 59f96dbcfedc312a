"""Read-only view over the modules and resources of a state document."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping

from ..models import StateDocument, StateModule, StateResource


class InvalidSchemaError(RuntimeError):
    """Raised when a required structural field of the state document is missing."""

    def __init__(
        self,
        message: str,
        *,
        source: Path | None = None,
        module_index: int | None = None,
        handle: str | None = None,
    ) -> None:
        super().__init__(message)
        self.source = source
        self.module_index = module_index
        self.handle = handle


@dataclass(frozen=True, slots=True)
class ResourceEntry:
    """A resource handle and type whose remaining fields are read on demand."""

    table: "ResourceTable"
    module_index: int
    handle: str
    type: str
    raw: Mapping[str, Any]

    def resolve(self) -> StateResource:
        """Check ``primary`` and return the full :class:`StateResource`."""

        return self.table._normalize_resource(self.module_index, self.handle, self.raw)


class ResourceTable:
    """Expose the resources of each state module as :class:`StateResource` records.

    Structure is checked as the document is walked, so a malformed resource in
    a module that is never consulted does not fail the run. :meth:`entries`
    goes further and defers the ``primary`` checks until a resource is resolved.
    """

    def __init__(self, document: StateDocument) -> None:
        self.document = document

    @property
    def source(self) -> Path:
        return self.document.source

    @property
    def module_count(self) -> int:
        return len(self._raw_modules())

    def module(self, index: int) -> StateModule:
        """Return the module at *index* in document order."""

        resources: Dict[str, StateResource] = {
            entry.handle: entry.resolve() for entry in self._module_entries(index)
        }
        return StateModule(index=index, resources=resources)

    def modules(self) -> Iterator[StateModule]:
        """Yield every module in document order."""

        for index in range(self.module_count):
            yield self.module(index)

    def resources(self, module_index: int | None = None) -> Iterator[StateResource]:
        """Yield resources of one module, or of all modules when no index is given."""

        if module_index is not None:
            yield from self.module(module_index)
            return

        for module in self.modules():
            yield from module

    def entries(self, module_index: int | None = None) -> Iterator[ResourceEntry]:
        """Yield unresolved resource entries, one module at a time.

        Only the module's ``resources`` mapping and each resource ``type`` are
        checked here.
        """

        indexes = [module_index] if module_index is not None else range(self.module_count)
        for index in indexes:
            yield from self._module_entries(index)

    # ------------------------------------------------------------------
    def _raw_modules(self) -> List[Any]:
        data = self.document.data
        if not isinstance(data, Mapping) or "modules" not in data:
            raise InvalidSchemaError(
                f"{self.source} is missing the 'modules' section", source=self.source
            )

        modules = data["modules"]
        if not isinstance(modules, list) or not modules:
            raise InvalidSchemaError(
                f"{self.source} must contain a non-empty 'modules' list", source=self.source
            )
        return modules

    def _module_entries(self, index: int) -> Iterator[ResourceEntry]:
        raw_modules = self._raw_modules()
        if index < 0 or index >= len(raw_modules):
            raise InvalidSchemaError(
                f"{self.source} has no module at index {index}",
                source=self.source,
                module_index=index,
            )

        raw_module = raw_modules[index]
        if not isinstance(raw_module, Mapping) or not isinstance(
            raw_module.get("resources"), Mapping
        ):
            raise InvalidSchemaError(
                f"{self.source} module {index} is missing the 'resources' mapping",
                source=self.source,
                module_index=index,
            )

        for handle, raw_resource in raw_module["resources"].items():
            if not isinstance(raw_resource, Mapping) or not isinstance(
                raw_resource.get("type"), str
            ):
                raise self._missing(index, handle, "type")
            yield ResourceEntry(
                table=self,
                module_index=index,
                handle=handle,
                type=raw_resource["type"],
                raw=raw_resource,
            )

    def _normalize_resource(self, index: int, handle: str, raw: Mapping[str, Any]) -> StateResource:
        primary = raw.get("primary")
        if not isinstance(primary, Mapping):
            raise self._missing(index, handle, "primary")

        resource_id = primary.get("id")
        if resource_id is None:
            raise self._missing(index, handle, "primary.id")

        attributes = primary.get("attributes")
        if not isinstance(attributes, Mapping):
            raise self._missing(index, handle, "primary.attributes")

        return StateResource(
            handle=handle,
            type=raw["type"],
            id=str(resource_id),
            attributes=dict(attributes),
        )

    def _missing(self, index: int, handle: str, field_name: str) -> InvalidSchemaError:
        return InvalidSchemaError(
            f"{self.source} resource {handle} in module {index} is missing '{field_name}'",
            source=self.source,
            module_index=index,
            handle=handle,
        )


__all__ = ["InvalidSchemaError", "ResourceEntry", "ResourceTable"]
