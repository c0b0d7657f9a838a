"""Declarative field constraints for pydantic transfer objects.

Constraints are attached to DTO fields through ``typing.Annotated``.  Each
marker hooks into pydantic's schema generation, so it is enforced by
``model_validate`` itself, and it also stays in ``FieldInfo.metadata`` where
``modules.restdocs.constraints`` reads it back for documentation.  Both sides
use the same objects, so documentation and enforcement cannot disagree.

Example::

    class BeerDto(BaseModel):
        beer_name: Annotated[Optional[str], NotBlank()] = None

    dto = validate_payload(BeerDto, request.data)

Rules are only checked when the validation context asks for it (see
:func:`validate_payload`).  Transfer objects built from stored entities may
legitimately carry empty fields and are not rejected.

Null values satisfy every constraint except ``NotNull``, ``NotBlank`` and
``NotEmpty``.
"""

from __future__ import annotations

import re
import sys
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Any, ClassVar, Mapping, TypeVar

from pydantic import BaseModel, GetCoreSchemaHandler, ValidationInfo
from pydantic.alias_generators import to_snake
from pydantic_core import PydanticCustomError, ValidationError, core_schema

CHECK_CONSTRAINTS = "check_constraints"

M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class Constraint(ABC):
    """Base class of all constraint markers."""

    message: ClassVar[str] = ""

    @abstractmethod
    def is_valid(self, value: Any) -> bool:
        """Return ``True`` when ``value`` satisfies the constraint."""

    @property
    def name(self) -> str:
        return type(self).__name__

    def attributes(self) -> dict[str, Any]:
        return asdict(self)

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.with_info_after_validator_function(
            self._check, handler(source_type)
        )

    def _check(self, value: Any, info: ValidationInfo) -> Any:
        if info.context and info.context.get(CHECK_CONSTRAINTS) and not self.is_valid(value):
            raise PydanticCustomError(to_snake(self.name), self.message, self.attributes())
        return value


@dataclass(frozen=True)
class Null(Constraint):
    """Server-assigned field; whatever a client sends for it is discarded.

    A value of the wrong type is read as ``None`` instead of failing the
    whole payload.
    """

    message: ClassVar[str] = "must be null"

    def is_valid(self, value: Any) -> bool:
        return value is None

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_wrap_validator_function(
            self._lenient, handler(source_type)
        )

    @staticmethod
    def _lenient(value: Any, validator: core_schema.ValidatorFunctionWrapHandler) -> Any:
        try:
            return validator(value)
        except ValidationError:
            return None


@dataclass(frozen=True)
class NotNull(Constraint):
    message: ClassVar[str] = "must not be null"

    def is_valid(self, value: Any) -> bool:
        return value is not None


@dataclass(frozen=True)
class NotBlank(Constraint):
    message: ClassVar[str] = "must not be blank"

    def is_valid(self, value: Any) -> bool:
        return value is not None and bool(str(value).strip())


@dataclass(frozen=True)
class NotEmpty(Constraint):
    message: ClassVar[str] = "must not be empty"

    def is_valid(self, value: Any) -> bool:
        return value is not None and len(value) > 0


@dataclass(frozen=True)
class Size(Constraint):
    message: ClassVar[str] = "size must be between {min} and {max}"

    min: int = 0
    max: int = sys.maxsize

    def is_valid(self, value: Any) -> bool:
        return value is None or self.min <= len(value) <= self.max


@dataclass(frozen=True)
class Min(Constraint):
    message: ClassVar[str] = "must be greater than or equal to {value}"

    value: int

    def is_valid(self, value: Any) -> bool:
        return value is None or value >= self.value


@dataclass(frozen=True)
class Max(Constraint):
    message: ClassVar[str] = "must be less than or equal to {value}"

    value: int

    def is_valid(self, value: Any) -> bool:
        return value is None or value <= self.value


@dataclass(frozen=True)
class Positive(Constraint):
    message: ClassVar[str] = "must be greater than 0"

    def is_valid(self, value: Any) -> bool:
        return value is None or value > 0


@dataclass(frozen=True)
class PositiveOrZero(Constraint):
    message: ClassVar[str] = "must be greater than or equal to 0"

    def is_valid(self, value: Any) -> bool:
        return value is None or value >= 0


@dataclass(frozen=True)
class Pattern(Constraint):
    message: ClassVar[str] = 'must match "{regexp}"'

    regexp: str

    def is_valid(self, value: Any) -> bool:
        return value is None or re.fullmatch(self.regexp, str(value)) is not None


@lru_cache(maxsize=None)
def constraints_for(model: type[BaseModel]) -> Mapping[str, tuple[Constraint, ...]]:
    """Return the declared constraints of every field of ``model``, in order.

    The result is read-only and memoized per class; field metadata never
    changes once the class is built.
    """
    return MappingProxyType(
        {
            name: tuple(m for m in field.metadata if isinstance(m, Constraint))
            for name, field in model.model_fields.items()
        }
    )


def validate_payload(model: type[M], data: Any) -> M:
    """Validate an inbound payload with its declared constraints switched on.

    Raises:
        pydantic.ValidationError: on wrong types or broken constraints.
    """
    return model.model_validate(data, context={CHECK_CONSTRAINTS: True})
