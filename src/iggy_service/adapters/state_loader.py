"""Load Terraform state snapshots from disk."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from ..models import StateDocument


class StateLoaderError(RuntimeError):
    """Base class for failures while reading a state snapshot."""

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(message)
        self.path = path


class NotFoundError(StateLoaderError):
    """Raised when the state path does not reference a readable regular file."""


class MalformedDocumentError(StateLoaderError):
    """Raised when the state file does not contain valid JSON."""

    def __init__(self, message: str, *, path: Path, diagnostic: str) -> None:
        super().__init__(message, path=path)
        self.diagnostic = diagnostic


class StateLoader:
    """Read and parse a Terraform state file into a :class:`StateDocument`.

    Only the JSON syntax is checked here. Structural expectations such as the
    ``modules`` list are enforced by :class:`~iggy_service.normalization.ResourceTable`
    when the document is walked.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self.path = Path(path)
        self._logger = logger or logging.getLogger(__name__)

    def load(self) -> StateDocument:
        """Return the parsed document or raise a :class:`StateLoaderError`."""

        self._logger.debug("Loading state file %s", self.path)
        if not self.path.is_file():
            raise NotFoundError(
                f"{self.path} is an invalid file, please check your path.", path=self.path
            )

        try:
            content = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise NotFoundError(f"Unable to read state file {self.path}: {exc}", path=self.path) from exc

        try:
            data = json.loads(content)
        except json.JSONDecodeError as exc:
            raise MalformedDocumentError(
                f"Parsing error in {self.path}: {exc}",
                path=self.path,
                diagnostic=str(exc),
            ) from exc

        return StateDocument(source=self.path, data=data)


def load_state(
    path: str | os.PathLike[str], *, logger: logging.Logger | None = None
) -> StateDocument:
    """Convenience wrapper around :meth:`StateLoader.load`."""

    return StateLoader(path, logger=logger).load()


__all__ = [
    "MalformedDocumentError",
    "NotFoundError",
    "StateLoader",
    "StateLoaderError",
    "load_state",
]
