"""Documentation snippets.

Each snippet checks its descriptors against the recorded operation and
produces the context for its Django template
(``restdocs/<snippet name>.adoc``).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, Sequence

from modules.restdocs.descriptors import FieldDescriptor, ParameterDescriptor
from modules.restdocs.exceptions import SnippetError
from modules.restdocs.operation import Operation, pretty_body
from modules.restdocs.payload import parse_json, verify_fields


def table_cell(value: Any) -> str:
    """Escape a value for an Asciidoctor table cell."""
    return "" if value is None else str(value).replace("|", "\\|")


class Snippet(ABC):
    name: str

    @property
    def template_name(self) -> str:
        return f"restdocs/{self.name}.adoc"

    @abstractmethod
    def create_context(self, operation: Operation) -> dict[str, Any]:
        """Verify the snippet against ``operation`` and build its template context."""


# ---------------------------------------------------------------------------
# HTTP request / response
# ---------------------------------------------------------------------------


class HttpRequestSnippet(Snippet):
    name = "http-request"

    def create_context(self, operation: Operation) -> dict[str, Any]:
        request = operation.request
        return {
            "method": request.method,
            "uri": request.uri,
            "headers": request.headers,
            "body": pretty_body(request.content),
        }


class HttpResponseSnippet(Snippet):
    name = "http-response"

    def create_context(self, operation: Operation) -> dict[str, Any]:
        response = operation.response
        return {
            "status_code": response.status_code,
            "reason_phrase": response.reason_phrase,
            "headers": response.headers,
            "body": pretty_body(response.content),
        }


# ---------------------------------------------------------------------------
# Parameters
# ---------------------------------------------------------------------------


class ParametersSnippet(Snippet):
    kind: str

    def __init__(self, descriptors: Sequence[ParameterDescriptor], relaxed: bool = False) -> None:
        self.descriptors = list(descriptors)
        self.relaxed = relaxed

    @abstractmethod
    def actual_parameters(self, operation: Operation) -> Iterable[str]:
        """Names of the parameters present in the recorded request."""

    def verify(self, operation: Operation) -> None:
        actual = set(self.actual_parameters(operation))
        documented = {d.name for d in self.descriptors}
        missing = sorted(
            d.name for d in self.descriptors if not d.optional and d.name not in actual
        )
        undocumented = [] if self.relaxed else sorted(actual - documented)
        problems = []
        if undocumented:
            problems.append(f"{self.kind} not documented: {undocumented}")
        if missing:
            problems.append(f"{self.kind} not found in the request: {missing}")
        if problems:
            raise SnippetError(". ".join(problems))

    def create_context(self, operation: Operation) -> dict[str, Any]:
        self.verify(operation)
        return {
            "parameters": [
                {
                    "name": table_cell(d.name),
                    "description": table_cell(d.description),
                    "optional": d.optional,
                    **d.attributes,
                }
                for d in self.descriptors
                if not d.ignored
            ]
        }


class PathParametersSnippet(ParametersSnippet):
    name = "path-parameters"
    kind = "Path parameters"

    def actual_parameters(self, operation: Operation) -> Iterable[str]:
        return operation.path_parameters.keys()

    def create_context(self, operation: Operation) -> dict[str, Any]:
        if operation.url_template is None:
            raise SnippetError(
                "Path parameters cannot be documented: the URL template is unknown."
            )
        context = super().create_context(operation)
        context["path"] = operation.url_template
        return context


class RequestParametersSnippet(ParametersSnippet):
    name = "request-parameters"
    kind = "Request parameters"

    def actual_parameters(self, operation: Operation) -> Iterable[str]:
        return operation.request.query_parameters.keys()


# ---------------------------------------------------------------------------
# Payload fields
# ---------------------------------------------------------------------------


class FieldsSnippet(Snippet):
    kind: str

    def __init__(self, descriptors: Sequence[FieldDescriptor], relaxed: bool = False) -> None:
        self.descriptors = list(descriptors)
        self.relaxed = relaxed

    @abstractmethod
    def content(self, operation: Operation) -> bytes:
        """The recorded body this snippet documents."""

    def create_context(self, operation: Operation) -> dict[str, Any]:
        types = verify_fields(
            parse_json(self.content(operation)),
            self.descriptors,
            relaxed=self.relaxed,
            kind=self.kind,
        )
        fields = [
            {
                "path": table_cell(d.path),
                "type": table_cell(d.type or types.get(d.path, "Varies")),
                "description": table_cell(d.description),
                "optional": d.optional,
                "constraints": table_cell(d.attributes.get("constraints", "")),
            }
            for d in self.descriptors
            if not d.ignored
        ]
        return {
            "fields": fields,
            "has_constraints": any("constraints" in d.attributes for d in self.descriptors),
        }


class RequestFieldsSnippet(FieldsSnippet):
    name = "request-fields"
    kind = "request"

    def content(self, operation: Operation) -> bytes:
        return operation.request.content


class ResponseFieldsSnippet(FieldsSnippet):
    name = "response-fields"
    kind = "response"

    def content(self, operation: Operation) -> bytes:
        return operation.response.content


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def path_parameters(*descriptors: ParameterDescriptor, relaxed: bool = False) -> PathParametersSnippet:
    return PathParametersSnippet(descriptors, relaxed=relaxed)


def request_parameters(*descriptors: ParameterDescriptor, relaxed: bool = False) -> RequestParametersSnippet:
    return RequestParametersSnippet(descriptors, relaxed=relaxed)


def request_fields(*descriptors: FieldDescriptor, relaxed: bool = False) -> RequestFieldsSnippet:
    return RequestFieldsSnippet(descriptors, relaxed=relaxed)


def response_fields(*descriptors: FieldDescriptor, relaxed: bool = False) -> ResponseFieldsSnippet:
    return ResponseFieldsSnippet(descriptors, relaxed=relaxed)
