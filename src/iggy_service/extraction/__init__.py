"""Profile binding extraction from tagged state resources."""

from .profile_extractor import ProfileExtractor, UnsupportedResourceError

__all__ = ["ProfileExtractor", "UnsupportedResourceError"]
