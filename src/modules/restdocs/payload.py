"""JSON payload inspection: field paths, field types, and coverage checks."""

from __future__ import annotations

import json
from typing import Any, Iterable, Optional

from modules.restdocs.descriptors import FieldDescriptor
from modules.restdocs.exceptions import SnippetError

VARIES = "Varies"


def parse_json(content: bytes) -> Optional[Any]:
    """Decode a JSON body; an empty body gives ``None``."""
    if not content:
        return None
    try:
        return json.loads(content)
    except ValueError as exc:
        raise SnippetError(f"Cannot document a payload that is not JSON: {exc}") from exc


def json_type(value: Any) -> str:
    if value is None:
        return "Null"
    if isinstance(value, bool):
        return "Boolean"
    if isinstance(value, (int, float)):
        return "Number"
    if isinstance(value, str):
        return "String"
    if isinstance(value, list):
        return "Array"
    return "Object"


def field_types(payload: Any, prefix: str = "") -> dict[str, str]:
    """Map every field path in ``payload`` to its JSON type.

    Array items are addressed with ``[]``; a path whose type differs between
    array items is reported as ``Varies``.
    """
    types: dict[str, str] = {}

    def record(path: str, value: Any) -> None:
        kind = json_type(value)
        types[path] = kind if types.get(path, kind) == kind else VARIES
        walk(value, path)

    def walk(value: Any, path: str) -> None:
        if isinstance(value, dict):
            for key, child in value.items():
                record(f"{path}.{key}" if path else key, child)
        elif isinstance(value, list):
            for item in value:
                if isinstance(item, (dict, list)):
                    walk(item, f"{path}[]")

    walk(payload, prefix)
    return types


def _is_related(path: str, other: str) -> bool:
    """``True`` when one path is the other, or an ancestor of it."""
    if path == other:
        return True
    for parent, child in ((path, other), (other, path)):
        if child.startswith(parent + ".") or child.startswith(parent + "[]"):
            return True
    return False


def verify_fields(
    payload: Any,
    descriptors: Iterable[FieldDescriptor],
    *,
    relaxed: bool = False,
    kind: str = "payload",
) -> dict[str, str]:
    """Check the documented fields against ``payload`` and return its types.

    Raises:
        SnippetError: when a required documented field is missing, or (unless
            ``relaxed``) when a payload field is not documented.
    """
    descriptors = list(descriptors)
    if payload is None:
        if any(not d.optional for d in descriptors):
            raise SnippetError(f"Cannot document {kind} fields as the {kind} body is empty.")
        return {}

    types = field_types(payload)
    missing = sorted(
        d.path for d in descriptors if not d.optional and d.path not in types
    )
    if missing:
        raise SnippetError(
            f"Fields with the following paths were not found in the {kind}: {missing}"
        )

    if not relaxed:
        documented = [d.path for d in descriptors]
        undocumented = sorted(
            path
            for path in types
            if not any(_is_related(path, doc) for doc in documented)
        )
        if undocumented:
            raise SnippetError(
                f"The following parts of the {kind} were not documented: {undocumented}"
            )
    return types
