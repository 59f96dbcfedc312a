"""Generate compliance controls for recognized state resources."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List

from .. import __version__
from ..catalog import ResourceLookup
from ..models import Describe, GeneratedControl, StateDocument, StateResource
from ..normalization import ResourceTable

DEFAULT_IMPACT = 1.0


class ControlGenerator:
    """Build one :class:`GeneratedControl` per resource whose type is in the catalog.

    Resources with unknown types are skipped without error, and their
    ``primary`` block is never read. Equality assertions follow the attribute
    order of the state file.
    """

    def __init__(
        self,
        lookup: ResourceLookup,
        *,
        logger: logging.Logger | None = None,
        version: str = __version__,
    ) -> None:
        self.lookup = lookup
        self.version = version
        self._logger = logger or logging.getLogger(__name__)

    def generate(
        self,
        document: StateDocument,
        source_path: str | os.PathLike[str] | None = None,
    ) -> List[GeneratedControl]:
        """Return controls for every known resource across all modules."""

        source = Path(source_path) if source_path is not None else document.source
        absolute_source = source.absolute()
        table = ResourceTable(document)

        controls: List[GeneratedControl] = []
        for entry in table.entries():
            resource_type = self.lookup.translate(entry.type)
            if resource_type != entry.type:
                self._logger.debug("Translated %s to %s", entry.type, resource_type)

            if not self.lookup.is_known(resource_type):
                self._logger.debug("Skipping %s with unknown type %s", entry.handle, resource_type)
                continue

            self._logger.debug("Resource %s matched type %s", entry.handle, resource_type)
            controls.append(self._build_control(resource_type, entry.resolve(), absolute_source))

        self._logger.debug("Generated %d controls from %s", len(controls), absolute_source)
        return controls

    # ------------------------------------------------------------------
    def _build_control(
        self, resource_type: str, resource: StateResource, source: Path
    ) -> GeneratedControl:
        control_id = f"{resource_type}::{resource.id}"

        describe = Describe(qualifier_type=resource_type, qualifier_id=resource.id)
        describe.add_existence()

        properties = self.lookup.properties_for(resource_type)
        for attribute, value in resource.attributes.items():
            if attribute in properties:
                self._logger.debug("%s property %s matched", resource_type, attribute)
                describe.add_equality(attribute, value)

        return GeneratedControl(
            id=control_id,
            title=f"Iggy {control_id}",
            descriptions={
                "default": (
                    f"{control_id} from the source file {source}\n"
                    f"Generated by Iggy v{self.version}"
                )
            },
            describe=describe,
            impact=DEFAULT_IMPACT,
        )


__all__ = ["ControlGenerator", "DEFAULT_IMPACT"]
