"""Orchestration layer used by the CLI to run the state interpreter pipelines."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Mapping, Sequence

from .adapters import MalformedDocumentError, NotFoundError, StateLoader, StateLoaderError
from .catalog import CatalogError, ResourceCatalog
from .extraction import ProfileExtractor, UnsupportedResourceError
from .generation import ControlGenerator
from .models import GeneratedControl, ProfileBinding, StateDocument
from .normalization import InvalidSchemaError, ResourceTable


@dataclass(slots=True)
class ExtractionResult:
    """Result returned by :meth:`IggyService.extract`."""

    bindings: dict[str, ProfileBinding]
    metadata: Mapping[str, Any]


@dataclass(slots=True)
class GenerationResult:
    """Result returned by :meth:`IggyService.generate`."""

    controls: list[GeneratedControl]
    metadata: Mapping[str, Any]


StateLoaderFactory = Callable[..., StateLoader]


class IggyService:
    """Load a state snapshot and run either the extraction or generation pipeline."""

    def __init__(
        self,
        *,
        loader_factory: StateLoaderFactory | None = None,
        extractor: ProfileExtractor | None = None,
        catalog: ResourceCatalog | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._loader_factory = loader_factory or StateLoader
        self._logger = logger or logging.getLogger(__name__)
        self._extractor = extractor or ProfileExtractor(logger=self._logger)
        self._catalog = catalog or ResourceCatalog()

    # ------------------------------------------------------------------
    def extract(self, state_path: Path) -> ExtractionResult:
        """Return the profile bindings found in the state file."""

        document = self._load(state_path)
        bindings = self._extractor.extract(document)

        metadata = self._metadata(document)
        metadata["binding_count"] = len(bindings)
        return ExtractionResult(bindings=bindings, metadata=metadata)

    def generate(
        self,
        state_path: Path,
        *,
        manifests: Sequence[str | Path] | None = None,
    ) -> GenerationResult:
        """Return controls generated for the known resources in the state file."""

        lookup = self._catalog.load(manifests)
        document = self._load(state_path)
        generator = ControlGenerator(lookup, logger=self._logger)
        controls = generator.generate(document)

        metadata = self._metadata(document)
        metadata["control_count"] = len(controls)
        return GenerationResult(controls=controls, metadata=metadata)

    # ------------------------------------------------------------------
    def _load(self, state_path: Path) -> StateDocument:
        return self._loader_factory(state_path, logger=self._logger).load()

    def _metadata(self, document: StateDocument) -> dict[str, Any]:
        return {
            "source": str(document.source.absolute()),
            "module_count": ResourceTable(document).module_count,
        }


SERVICE_ERRORS = (
    StateLoaderError,
    InvalidSchemaError,
    UnsupportedResourceError,
    CatalogError,
)


__all__ = [
    "CatalogError",
    "ExtractionResult",
    "GenerationResult",
    "IggyService",
    "InvalidSchemaError",
    "MalformedDocumentError",
    "NotFoundError",
    "SERVICE_ERRORS",
    "UnsupportedResourceError",
]
