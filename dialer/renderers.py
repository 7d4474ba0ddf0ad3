# dialer/renderers.py
# -*- coding: utf-8 -*-
"""
Renderers turning an InstallPlan into text.

- json: a list of step mappings.
- yaml: the same structure as YAML.
- puppet: a manifest with one resource declaration per step.
"""

import json
from typing import Any, Callable, Dict, List

import yaml

from dialer.exceptions import DialerError
from dialer.plan import InstallPlan

PUPPET_INDENT = "  "


def plan_to_dicts(plan: InstallPlan) -> List[Dict[str, Any]]:
    return [step.model_dump() for step in plan.steps]


def render_json(plan: InstallPlan) -> str:
    return json.dumps(plan_to_dicts(plan), indent=2, ensure_ascii=False)


def render_yaml(plan: InstallPlan) -> str:
    return yaml.safe_dump(
        plan_to_dicts(plan),
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )


def puppet_string(value: str) -> str:
    """Single-quoted Puppet string literal; only backslash and quote need escaping."""
    return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"


def puppet_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(puppet_value(item) for item in value) + "]"
    return puppet_string(str(value))


def puppet_reference(resource_type: str, title: str) -> str:
    return f"{resource_type.capitalize()}[{puppet_string(title)}]"


def render_puppet(plan: InstallPlan) -> str:
    """
    Render the plan as a Puppet manifest body.

    Dependencies become `require` metaparameters referencing the titles of
    the required steps.
    """
    by_name = {step.name: step for step in plan.steps}
    blocks: List[str] = []

    for step in plan.steps:
        attributes: Dict[str, str] = {
            key: puppet_value(value) for key, value in step.attributes.items()
        }
        if step.requires:
            references = [
                puppet_reference(by_name[name].resource_type, by_name[name].title)
                for name in step.requires
            ]
            attributes["require"] = (
                references[0]
                if len(references) == 1
                else "[" + ", ".join(references) + "]"
            )

        width = max((len(key) for key in attributes), default=0)
        lines = [f"{step.resource_type} {{ {puppet_string(step.title)}:"]
        for key, value in attributes.items():
            lines.append(f"{PUPPET_INDENT}{key.ljust(width)} => {value},")
        lines.append("}")
        blocks.append("\n".join(lines))

    return "\n\n".join(blocks) + "\n"


RENDERERS: Dict[str, Callable[[InstallPlan], str]] = {
    "json": render_json,
    "yaml": render_yaml,
    "puppet": render_puppet,
}


def render_plan(plan: InstallPlan, output_format: str = "yaml") -> str:
    """
    Render a plan in the named format.

    Raises:
        DialerError: If the format is unknown.
    """
    renderer = RENDERERS.get(output_format)
    if renderer is None:
        raise DialerError(
            f"Unknown output format '{output_format}'. Choose from: {', '.join(RENDERERS)}"
        )
    return renderer(plan)
