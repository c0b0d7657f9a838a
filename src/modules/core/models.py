"""Base abstract model for versioned, timestamped entities.

Provides ``BaseEntity``: UUIDv7 primary key, an optimistic-concurrency
``version`` counter and ``created_date`` / ``last_modified_date`` bookkeeping.

- ``version`` is ``None`` until the first save, ``0`` after the insert and is
  incremented on every later save.
- ``save()`` guard ensures ``version`` and ``last_modified_date`` are included
  when ``update_fields`` is specified (Django skips ``auto_now`` fields
  otherwise).
"""

from __future__ import annotations

import uuid6
from django.db import models


class BaseEntity(models.Model):
    """Abstract base with UUIDv7 PK, version counter and timestamps."""

    id = models.UUIDField(
        primary_key=True,
        default=uuid6.uuid7,
        editable=False,
    )
    version = models.PositiveIntegerField(null=True, blank=True, default=None)
    created_date = models.DateTimeField(auto_now_add=True)
    last_modified_date = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs) -> None:
        """Bump ``version`` and keep the bookkeeping columns in ``update_fields``."""
        self.version = 0 if self.version is None else self.version + 1
        update_fields = kwargs.get("update_fields")
        if update_fields is not None:
            missing = [
                name
                for name in ("version", "last_modified_date")
                if name not in update_fields
            ]
            kwargs["update_fields"] = list(update_fields) + missing
        super().save(*args, **kwargs)
