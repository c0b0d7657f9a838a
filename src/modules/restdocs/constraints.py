"""Constraint descriptions for documented request fields.

Reads the constraint markers declared on a pydantic model (see
``modules.core.constraints``) and renders them as human-readable sentences
for the ``Constraints`` column of a request-fields snippet.  The model passed
in must be the class whose instances are serialized, so the documentation
follows the rules that are actually enforced.

Example::

    fields = ConstrainedFields(BeerDto)
    request_fields(
        fields.with_path("beerName", "Name of the beer"),
        fields.with_path("id", ignored=True),
    )

An unknown field path always raises ``FieldNotFoundError``; a field without
constraints is described by an empty string.
"""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, get_args

from django.conf import settings
from pydantic import BaseModel

from modules.core.constraints import Constraint, constraints_for
from modules.restdocs.descriptors import FieldDescriptor
from modules.restdocs.exceptions import FieldNotFoundError

DESCRIPTION_SEPARATOR = ". "


class ConstraintDescriptionResolver(ABC):
    """Turns one constraint into one sentence of documentation."""

    @abstractmethod
    def resolve_description(self, constraint: Constraint) -> str:
        """Describe ``constraint``."""


class TemplateConstraintDescriptionResolver(ConstraintDescriptionResolver):
    """Formats a per-constraint template with the constraint's attributes.

    Templates are looked up by constraint class name, first in ``templates``
    (``settings.RESTDOCS["CONSTRAINT_DESCRIPTIONS"]`` when omitted) and then
    in the constraint's own validation message.
    """

    def __init__(self, templates: Optional[Mapping[str, str]] = None) -> None:
        if templates is None:
            templates = settings.RESTDOCS.get("CONSTRAINT_DESCRIPTIONS", {})
        self._templates = dict(templates)

    def resolve_description(self, constraint: Constraint) -> str:
        template = self._templates.get(constraint.name, constraint.message)
        return template.format(**constraint.attributes())


class ConstraintDescriptions:
    """Constraint descriptions for the fields of one model class."""

    def __init__(
        self,
        model: type[BaseModel],
        resolver: Optional[ConstraintDescriptionResolver] = None,
    ) -> None:
        self._model = model
        self._resolver = resolver or TemplateConstraintDescriptionResolver()

    def descriptions_for_property(self, path: str) -> list[str]:
        """Describe every constraint declared on ``path``, in declaration order.

        ``path`` may use the JSON alias or the attribute name, and may be
        dotted to reach into nested models.

        Raises:
            FieldNotFoundError: if the model has no field at ``path``.
        """
        return [
            self._resolver.resolve_description(constraint)
            for constraint in _constraints_at(self._model, path)
        ]


def describe_constraints(
    model: type[BaseModel],
    path: str,
    resolver: Optional[ConstraintDescriptionResolver] = None,
) -> str:
    """Return the constraints of ``path`` joined into a single sentence list."""
    descriptions = ConstraintDescriptions(model, resolver)
    return DESCRIPTION_SEPARATOR.join(descriptions.descriptions_for_property(path))


class ConstrainedFields:
    """Builds field descriptors carrying a ``constraints`` attribute."""

    def __init__(
        self,
        model: type[BaseModel],
        resolver: Optional[ConstraintDescriptionResolver] = None,
    ) -> None:
        self._descriptions = ConstraintDescriptions(model, resolver)

    def with_path(self, path: str, description: str = "", **kwargs: Any) -> FieldDescriptor:
        constraints = DESCRIPTION_SEPARATOR.join(
            self._descriptions.descriptions_for_property(path)
        )
        attributes = {**kwargs.pop("attributes", {}), "constraints": constraints}
        return FieldDescriptor(path, description, attributes=attributes, **kwargs)


# ---------------------------------------------------------------------------
# Path resolution
# ---------------------------------------------------------------------------


def _constraints_at(model: type[BaseModel], path: str) -> tuple[Constraint, ...]:
    current: Optional[type[BaseModel]] = model
    segments = path.split(".")
    for position, segment in enumerate(segments):
        name = _field_name(current, segment.removesuffix("[]")) if current else None
        if name is None:
            raise FieldNotFoundError(model, path)
        if position == len(segments) - 1:
            return constraints_for(current)[name]
        current = _nested_model(current.model_fields[name].annotation)
    raise FieldNotFoundError(model, path)


def _field_name(model: type[BaseModel], segment: str) -> Optional[str]:
    for name, field in model.model_fields.items():
        if segment in (name, field.alias):
            return name
    return None


def _nested_model(annotation: Any) -> Optional[type[BaseModel]]:
    """Find the model inside ``Optional[...]``, ``list[...]`` and friends."""
    if inspect.isclass(annotation) and issubclass(annotation, BaseModel):
        return annotation
    for arg in get_args(annotation):
        nested = _nested_model(arg)
        if nested is not None:
            return nested
    return None
