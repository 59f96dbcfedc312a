"""Profile binding records produced by tag extraction."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

# Availability zone reported for every tagged VPC.
DEFAULT_VPC_AZ = "us-west-2"


class ProfileType(str, Enum):
    """Resource kinds that may carry a profile binding."""

    AWS_VPC = "aws_vpc"
    AWS_INSTANCE = "aws_instance"


@dataclass(frozen=True, slots=True)
class ProfileBinding:
    """Links a tagged resource to an external compliance profile."""

    type: ProfileType
    url: Optional[str] = None
    az: Optional[str] = None
    public_ip: Optional[str] = None
    key_name: Optional[str] = None

    @classmethod
    def for_vpc(cls, url: Optional[str]) -> "ProfileBinding":
        return cls(type=ProfileType.AWS_VPC, az=DEFAULT_VPC_AZ, url=url)

    @classmethod
    def for_instance(
        cls,
        url: Optional[str],
        *,
        public_ip: Optional[str],
        key_name: Optional[str],
    ) -> "ProfileBinding":
        return cls(
            type=ProfileType.AWS_INSTANCE,
            public_ip=public_ip,
            key_name=key_name,
            url=url,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return the type-specific fields of the binding."""

        if self.type is ProfileType.AWS_VPC:
            return {"type": self.type.value, "az": self.az, "url": self.url}

        return {
            "type": self.type.value,
            "public_ip": self.public_ip,
            "key_name": self.key_name,
            "url": self.url,
        }
