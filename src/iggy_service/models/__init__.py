"""Data models for Terraform state resources and their derived records."""

from .control import Assertion, Describe, GeneratedControl
from .profile import ProfileBinding, ProfileType
from .state import StateDocument, StateModule, StateResource

__all__ = [
    "Assertion",
    "Describe",
    "GeneratedControl",
    "ProfileBinding",
    "ProfileType",
    "StateDocument",
    "StateModule",
    "StateResource",
]
