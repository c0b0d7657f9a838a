"""Entry point for documenting a test call.

Example::

    response = client.get("/api/v1/beer/{}".format(beer_id), {"iscold": "yes"})
    document(
        "v1/beer-get",
        response,
        path_parameters(ParameterDescriptor("beer_id", "UUID of desired beer to get.")),
        response_fields(FieldDescriptor("id", "Id of Beer"), ...),
    )

Snippets are written to ``settings.RESTDOCS["OUTPUT_DIR"]/<identifier>/``.
The ``http-request`` and ``http-response`` snippets are always written.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog
from django.conf import settings
from django.template.loader import render_to_string

from modules.restdocs.operation import Operation
from modules.restdocs.snippets import HttpRequestSnippet, HttpResponseSnippet, Snippet

logger = structlog.get_logger(__name__)


def default_snippets() -> list[Snippet]:
    return [HttpRequestSnippet(), HttpResponseSnippet()]


def document(identifier: str, response: Any, *snippets: Snippet) -> Operation:
    """Verify ``snippets`` against the recorded call and write them to disk.

    Every snippet is rendered before anything is written, so a failing
    snippet leaves no partial output behind.

    Raises:
        SnippetError: if the documentation does not match the call.
    """
    operation = Operation.from_response(identifier, response)

    rendered = [
        (snippet.name, render_to_string(snippet.template_name, snippet.create_context(operation)))
        for snippet in [*default_snippets(), *snippets]
    ]

    directory = Path(settings.RESTDOCS["OUTPUT_DIR"]) / identifier
    directory.mkdir(parents=True, exist_ok=True)
    for name, content in rendered:
        target = directory / f"{name}.adoc"
        target.write_text(content, encoding="utf-8")
        logger.info("restdocs.snippet_written", identifier=identifier, snippet=name, path=str(target))
    return operation
