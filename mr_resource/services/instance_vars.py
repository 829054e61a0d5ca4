"""Flatten pipeline instance variables into a build URL query string."""

import json
from typing import Any, List, Mapping


def _scalar_to_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def flatten_instance_vars(node: Mapping[str, Any], prefix: str | None = None) -> str | None:
    """Render nested instance variables as ``vars.a.b=value`` pairs joined by ``&``.

    Keys are visited in the order supplied, so equal input always gives the
    same string. Scalars are JSON-encoded and every ``"`` becomes ``%22``.

    Args:
        node: Mapping of variable names to scalars or nested mappings.
        prefix: Dotted path of ``node`` inside the top-level mapping.

    Returns:
        The query string, or None when there is nothing to render.

    Example:
        {"a": 0, "b": {"c": "x"}} -> 'vars.a=0&vars.b.c=%22x%22'
    """
    params: List[str] = []
    for key, value in node.items():
        param = f"{prefix}.{key}" if prefix is not None else key
        if isinstance(value, Mapping):
            nested = flatten_instance_vars(value, param)
            if nested:
                params.append(nested)
        else:
            params.append(f"vars.{param}={_scalar_to_json(value)}".replace('"', "%22"))
    if not params:
        return None
    return "&".join(params)


def instance_vars_suffix(instance_vars: Mapping[str, Any] | None) -> str:
    """Query suffix for the build URL: ``?...`` or empty string."""
    if not instance_vars:
        return ""
    query = flatten_instance_vars(instance_vars)
    return f"?{query}" if query else ""
