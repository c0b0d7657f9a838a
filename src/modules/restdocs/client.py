"""Test client that keeps what it sent, so the call can be documented."""

from __future__ import annotations

from django.conf import settings
from rest_framework.test import APIClient

from modules.restdocs.operation import host_header


class RestDocsClient(APIClient):
    """``APIClient`` addressing the documented host and recording request bodies.

    Requests are sent to ``settings.RESTDOCS`` ``URI_HOST`` over
    ``URI_SCHEME``, so absolute URLs in responses (``Location``) match the
    documentation.  The encoded body of every request is attached to its
    response as ``request_content``.
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.defaults.setdefault("HTTP_HOST", host_header())
        self._secure = settings.RESTDOCS.get("URI_SCHEME", "http") == "https"

    def generic(
        self,
        method,
        path,
        data="",
        content_type="application/octet-stream",
        secure=False,
        **extra,
    ):
        response = super().generic(
            method, path, data, content_type, secure or self._secure, **extra
        )
        if isinstance(data, str):
            data = data.encode(settings.DEFAULT_CHARSET)
        response.request_content = data or b""
        return response
