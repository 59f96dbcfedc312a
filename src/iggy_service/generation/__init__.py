"""Control generation for recognized state resources."""

from .control_generator import ControlGenerator

__all__ = ["ControlGenerator"]
