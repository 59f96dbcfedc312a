"""Resource catalog: type translations and assertable properties."""

from .resource_catalog import CatalogError, ResourceCatalog, ResourceLookup

__all__ = [
    "CatalogError",
    "ResourceCatalog",
    "ResourceLookup",
]
