"""Derive profile bindings and compliance controls from Terraform state."""

__version__ = "0.3.0"

__all__ = ["__version__"]
