"""Output helpers for profile bindings and generated controls."""

from .renderers import (
    bindings_to_dict,
    controls_to_list,
    render_bindings_table,
    render_control_ruby,
    render_controls_ruby,
    ruby_literal,
    ruby_string,
)

__all__ = [
    "bindings_to_dict",
    "controls_to_list",
    "render_bindings_table",
    "render_control_ruby",
    "render_controls_ruby",
    "ruby_literal",
    "ruby_string",
]
