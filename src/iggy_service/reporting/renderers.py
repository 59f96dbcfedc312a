"""Serialize profile bindings and generated controls for output."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Sequence

from ..models import Assertion, GeneratedControl, ProfileBinding, ProfileType

_RUBY_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "#": "\\#",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def bindings_to_dict(bindings: Mapping[str, ProfileBinding]) -> Dict[str, Dict[str, Any]]:
    """Return a JSON-ready mapping of binding key to type-specific fields."""

    return {key: binding.to_dict() for key, binding in bindings.items()}


def render_bindings_table(bindings: Mapping[str, ProfileBinding]) -> str:
    """Render bindings as a simple text table for terminal output."""

    if not bindings:
        return "No tagged resources found."

    headers = ("Key", "Type", "URL", "Detail")
    rows = [headers]
    for key, binding in bindings.items():
        if binding.type is ProfileType.AWS_VPC:
            detail = f"az={binding.az}"
        else:
            detail = f"public_ip={binding.public_ip or '-'} key_name={binding.key_name or '-'}"
        rows.append((key, binding.type.value, binding.url or "-", detail))

    widths = [max(len(str(row[idx])) for row in rows) for idx in range(len(headers))]

    def format_row(values: tuple[str, str, str, str]) -> str:
        return "  ".join(value.ljust(width) for value, width in zip(values, widths, strict=True))

    lines = [format_row(headers)]
    lines.append("  ".join("=" * width for width in widths))
    for row in rows[1:]:
        lines.append(format_row(row))
    return "\n".join(lines)


def controls_to_list(controls: Sequence[GeneratedControl]) -> List[Dict[str, Any]]:
    """Return a JSON-ready list describing each control and its assertions."""

    return [
        {
            "id": control.id,
            "title": control.title,
            "descriptions": dict(control.descriptions),
            "impact": control.impact,
            "tests": [list(assertion.as_tuple()) for assertion in control.assertions],
        }
        for control in controls
    ]


def ruby_string(value: Any) -> str:
    """Quote *value* as a Ruby double-quoted string literal."""

    text = "" if value is None else str(value)
    escaped = "".join(_RUBY_ESCAPES.get(char, char) for char in text)
    return f'"{escaped}"'


def ruby_literal(value: Any) -> str:
    """Render an attribute value as a Ruby literal of the matching kind.

    Legacy state stores every attribute as a string, but newer snapshots may
    carry JSON booleans, numbers or nested values. Nested values are compared
    as their JSON text.
    """

    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        return ruby_string(value)
    return ruby_string(json.dumps(value, sort_keys=True))


def _render_assertion(assertion: Assertion) -> str:
    if assertion.is_existence:
        return "it { should exist }"
    return (
        f"its({ruby_string(assertion.name)}) "
        f"{{ should {assertion.operator} {ruby_literal(assertion.expected)} }}"
    )


def render_control_ruby(control: GeneratedControl) -> str:
    """Render a single control as an InSpec ``control`` block."""

    describe = control.describe
    lines = [
        f"control {ruby_string(control.id)} do",
        f"  impact {control.impact}",
        f"  title {ruby_string(control.title)}",
        f"  desc {ruby_string(control.description)}",
        f"  describe {describe.qualifier_type}({ruby_string(describe.qualifier_id)}) do",
    ]
    lines.extend(f"    {_render_assertion(assertion)}" for assertion in describe.assertions)
    lines.append("  end")
    lines.append("end")
    return "\n".join(lines)


def render_controls_ruby(controls: Sequence[GeneratedControl]) -> str:
    """Render controls as the contents of an InSpec controls file."""

    return "\n\n".join(render_control_ruby(control) for control in controls) + "\n"
