"""A recorded request/response exchange, built from a Django test response."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any, Optional

from django.conf import settings

from modules.restdocs.exceptions import SnippetError

# Headers the test client always sets; they say nothing about the API.
_SKIPPED_REQUEST_HEADERS = {"cookie", "host"}
_BODY_HEADERS = {"content-type", "content-length"}

_ROUTE_PARAMETER = re.compile(r"<(?:\w+:)?(\w+)>")


@dataclass(frozen=True)
class OperationRequest:
    method: str
    path: str
    query_string: str
    query_parameters: dict[str, list[str]]
    headers: list[tuple[str, str]]
    content: bytes

    @property
    def uri(self) -> str:
        return f"{self.path}?{self.query_string}" if self.query_string else self.path


@dataclass(frozen=True)
class OperationResponse:
    status_code: int
    headers: list[tuple[str, str]]
    content: bytes

    @property
    def reason_phrase(self) -> str:
        try:
            return HTTPStatus(self.status_code).phrase
        except ValueError:
            return ""


@dataclass(frozen=True)
class Operation:
    """Everything a snippet may render about one documented call."""

    identifier: str
    request: OperationRequest
    response: OperationResponse
    url_template: Optional[str] = None
    path_parameters: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_response(cls, identifier: str, response: Any) -> Operation:
        """Build an operation from a response returned by the Django test client.

        The request body is only available when the call went through
        ``RestDocsClient``; other clients document an empty request body.
        """
        request = getattr(response, "wsgi_request", None)
        if request is None:
            raise SnippetError(
                "The response carries no request; use the Django test client."
            )

        content = getattr(response, "request_content", b"")
        headers = [
            (name, value)
            for name, value in request.headers.items()
            if value
            and name.lower() not in _SKIPPED_REQUEST_HEADERS
            and (content or name.lower() not in _BODY_HEADERS)
        ]
        headers.append(("Host", host_header()))

        match = response.resolver_match
        route = getattr(match, "route", None)
        url_template = "/" + _ROUTE_PARAMETER.sub(r"{\1}", route) if route else None

        return cls(
            identifier=identifier,
            request=OperationRequest(
                method=request.method,
                path=request.path,
                query_string=request.META.get("QUERY_STRING", ""),
                query_parameters={key: request.GET.getlist(key) for key in request.GET},
                headers=headers,
                content=content,
            ),
            response=OperationResponse(
                status_code=response.status_code,
                headers=list(response.items()),
                content=b"" if getattr(response, "streaming", False) else response.content,
            ),
            url_template=url_template,
            path_parameters={key: str(value) for key, value in match.kwargs.items()},
        )


def host_header() -> str:
    """The ``Host`` value for the configured documentation URI."""
    config = settings.RESTDOCS
    scheme = config.get("URI_SCHEME", "http")
    host = config.get("URI_HOST", "localhost")
    port = int(config.get("URI_PORT", 80))
    default_port = 443 if scheme == "https" else 80
    return host if port == default_port else f"{host}:{port}"


def pretty_body(content: bytes) -> str:
    """Indent JSON bodies; other bodies are decoded as they are."""
    if not content:
        return ""
    try:
        return json.dumps(json.loads(content), indent=2)
    except ValueError:
        return content.decode(settings.DEFAULT_CHARSET, errors="replace")
