"""Descriptors for documented payload fields and request parameters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class FieldDescriptor:
    """A payload field, addressed by a dotted JSON path (``a.b``, ``items[].id``).

    ``ignored`` fields count as documented but are left out of the snippet.
    ``optional`` fields may be absent from the payload.  ``type`` overrides
    the JSON type detected from the payload.
    """

    path: str
    description: str = ""
    type: Optional[str] = None
    optional: bool = False
    ignored: bool = False
    attributes: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ParameterDescriptor:
    """A path or query parameter, addressed by name."""

    name: str
    description: str = ""
    optional: bool = False
    ignored: bool = False
    attributes: Mapping[str, Any] = field(default_factory=dict)
