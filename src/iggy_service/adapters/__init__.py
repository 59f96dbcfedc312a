"""Adapter layer package for reading Terraform state snapshots."""

from .state_loader import (
    MalformedDocumentError,
    NotFoundError,
    StateLoader,
    StateLoaderError,
    load_state,
)

__all__ = [
    "MalformedDocumentError",
    "NotFoundError",
    "StateLoader",
    "StateLoaderError",
    "load_state",
]
