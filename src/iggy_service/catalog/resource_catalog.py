"""Load the resource translation table and assertable property sets."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, FrozenSet, Mapping, MutableMapping, Sequence, Set

import yaml


class CatalogError(RuntimeError):
    """Raised when resource catalog manifests cannot be loaded or parsed."""


@dataclass(frozen=True, slots=True)
class ResourceLookup:
    """Immutable lookup tables consulted by the control generator."""

    translations: Mapping[str, str] = field(default_factory=dict)
    properties: Mapping[str, FrozenSet[str]] = field(default_factory=dict)

    @property
    def known_types(self) -> FrozenSet[str]:
        return frozenset(self.properties)

    def translate(self, resource_type: str) -> str:
        """Return the logical type for a raw provider type name."""

        return self.translations.get(resource_type, resource_type)

    def is_known(self, resource_type: str) -> bool:
        return resource_type in self.properties

    def properties_for(self, resource_type: str) -> FrozenSet[str]:
        return self.properties.get(resource_type, frozenset())


PACKAGED_MANIFEST = Path(__file__).resolve().parent / "manifests" / "aws-inspec.yaml"
SUPPORTED_VERSIONS = frozenset({"1"})


class ResourceCatalog:
    """Merge catalog manifests into a :class:`ResourceLookup`.

    The base manifests (the packaged AWS table unless others are given) are
    applied first, then any manifests passed to :meth:`load`, in order.
    """

    def __init__(self, default_manifests: Sequence[Path | str] | None = None) -> None:
        base = (PACKAGED_MANIFEST,) if default_manifests is None else default_manifests
        self._base_manifests = tuple(Path(path) for path in base)

    # ------------------------------------------------------------------
    def load(self, manifests: Sequence[Path | str] | None = None) -> ResourceLookup:
        """Return the lookup built from the base and supplied manifests."""

        translations: Dict[str, str] = {}
        properties: MutableMapping[str, Set[str]] = {}
        for manifest_path in (*self._base_manifests, *(Path(path) for path in manifests or ())):
            manifest = self._read_manifest(manifest_path)
            self._merge_translations(manifest_path, manifest, translations)
            self._merge_resources(manifest_path, manifest, properties)

        return ResourceLookup(
            translations=translations,
            properties={name: frozenset(props) for name, props in properties.items()},
        )

    # ------------------------------------------------------------------
    def _read_manifest(self, path: Path) -> Mapping[str, Any]:
        try:
            with path.open("r", encoding="utf-8") as handle:
                manifest = yaml.safe_load(handle)
        except FileNotFoundError as exc:
            raise CatalogError(f"Resource catalog manifest not found: {path}") from exc
        except OSError as exc:  # pragma: no cover - filesystem errors surfaced to caller
            raise CatalogError(f"Unable to open resource catalog manifest {path}") from exc
        except yaml.YAMLError as exc:
            raise CatalogError(f"{path} is not a valid YAML resource catalog: {exc}") from exc

        if manifest is None:
            return {}
        if not isinstance(manifest, Mapping):
            raise CatalogError(f"{path} must define translations and resources as a mapping")

        version = manifest.get("version")
        if version is not None and str(version) not in SUPPORTED_VERSIONS:
            raise CatalogError(f"{path} uses unsupported catalog version {version}")
        return manifest

    def _merge_translations(
        self, path: Path, manifest: Mapping[str, Any], translations: Dict[str, str]
    ) -> None:
        raw_translations = manifest.get("translations") or {}
        if not isinstance(raw_translations, Mapping):
            raise CatalogError(f"'translations' must be a mapping in {path}")
        for source_type, target_type in raw_translations.items():
            translations[str(source_type)] = str(target_type)

    def _merge_resources(
        self, path: Path, manifest: Mapping[str, Any], properties: MutableMapping[str, Set[str]]
    ) -> None:
        raw_resources = manifest.get("resources") or {}
        if not isinstance(raw_resources, Mapping):
            raise CatalogError(f"'resources' must be a mapping in {path}")
        for resource_type, entry in raw_resources.items():
            resource_type = str(resource_type)
            entry = entry or {}
            if not isinstance(entry, Mapping):
                raise CatalogError(f"Resource entry {resource_type} must be a mapping in {path}")

            # enabled: false withdraws a type contributed by an earlier manifest
            if entry.get("enabled") is False:
                properties.pop(resource_type, None)
                continue

            merged = properties.setdefault(resource_type, set())
            merged.update(str(name) for name in entry.get("properties") or [])


__all__ = ["CatalogError", "PACKAGED_MANIFEST", "ResourceCatalog", "ResourceLookup"]
