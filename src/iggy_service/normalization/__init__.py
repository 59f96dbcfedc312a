"""Normalization helpers that turn raw state JSON into service models."""

from .resource_table import InvalidSchemaError, ResourceEntry, ResourceTable

__all__ = ["InvalidSchemaError", "ResourceEntry", "ResourceTable"]
