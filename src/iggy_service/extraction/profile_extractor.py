"""Extract profile bindings from tagged resources in a state document."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict

from ..models import ProfileBinding, ProfileType, StateDocument, StateResource
from ..normalization import ResourceTable

TAG_NAME = "iggy_name_"
TAG_URL = "iggy_url_"
NAME_PREFIX = f"tags.{TAG_NAME}"


class UnsupportedResourceError(RuntimeError):
    """Raised when a profile tag is attached to a resource type that cannot carry one."""

    def __init__(self, source: Path, resource_id: str, resource_type: str) -> None:
        super().__init__(
            f"{source} {resource_id} has a profile-tagged resource but "
            f"{resource_type} is currently unsupported."
        )
        self.source = source
        self.resource_id = resource_id
        self.resource_type = resource_type


class ProfileExtractor:
    """Map ``tags.iggy_name_<name>`` tags to :class:`ProfileBinding` records.

    Only the first module of the document is scanned. Resource types are
    matched by prefix, so ``aws_vpc_peering_connection`` binds as a VPC.
    """

    def __init__(self, *, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    def extract(self, document: StateDocument) -> Dict[str, ProfileBinding]:
        """Return bindings keyed by ``"<resource-id>:<name>"``."""

        table = ResourceTable(document)
        bindings: Dict[str, ProfileBinding] = {}

        for resource in table.resources(0):
            for attribute in resource.attributes:
                if not attribute.startswith(NAME_PREFIX):
                    continue

                name = attribute[len(NAME_PREFIX):]
                self._logger.debug(
                    "Resource %s attribute %s matched profile tag", resource.handle, attribute
                )
                key = f"{resource.id}:{name}"
                if key in bindings:
                    self._logger.debug("Binding %s replaced by resource %s", key, resource.handle)
                bindings[key] = self._bind(document.source, resource, name)

        self._logger.debug("Extracted %d profile bindings from %s", len(bindings), document.source)
        return bindings

    # ------------------------------------------------------------------
    def _bind(self, source: Path, resource: StateResource, name: str) -> ProfileBinding:
        url = resource.attribute(f"tags.{TAG_URL}{name}")

        if resource.type.startswith(ProfileType.AWS_VPC.value):
            return ProfileBinding.for_vpc(url)

        if resource.type.startswith(ProfileType.AWS_INSTANCE.value):
            return ProfileBinding.for_instance(
                url,
                public_ip=resource.attribute("public_ip"),
                key_name=resource.attribute("key_name"),
            )

        raise UnsupportedResourceError(source, resource.id, resource.type)


__all__ = ["ProfileExtractor", "UnsupportedResourceError", "TAG_NAME", "TAG_URL"]
