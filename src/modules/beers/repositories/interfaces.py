"""Beer repository interface.

The service layer depends on this contract; tests replace the Django
implementation with a mock.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.beers.models import Beer


class IBeerRepository(IRepository["Beer"]):
    """Repository contract for the Beer aggregate."""
