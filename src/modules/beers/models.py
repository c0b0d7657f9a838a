"""Beer persistence model.

The ``Beer`` entity is owned by the persistence layer; the API never exposes
it directly and converts it through ``BeerMapper`` into ``BeerDto``.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseEntity


class BeerStyle(models.TextChoices):
    LAGER = "LAGER", "Lager"
    PILSNER = "PILSNER", "Pilsner"
    STOUT = "STOUT", "Stout"
    GOSE = "GOSE", "Gose"
    PORTER = "PORTER", "Porter"
    ALE = "ALE", "Ale"
    WHEAT = "WHEAT", "Wheat"
    IPA = "IPA", "IPA"
    PALE_ALE = "PALE_ALE", "Pale Ale"
    SAISON = "SAISON", "Saison"


class Beer(BaseEntity):
    """Beer aggregate root.

    ``upc`` is a 64-bit integer; ``price`` keeps currency precision
    (two decimal places).
    """

    beer_name = models.CharField(max_length=255, null=True, blank=True)
    beer_style = models.CharField(
        max_length=20,
        choices=BeerStyle.choices,
        null=True,
        blank=True,
    )
    upc = models.BigIntegerField(null=True, blank=True)
    price = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    quantity_on_hand = models.IntegerField(null=True, blank=True)

    class Meta:
        db_table = "beers"
        ordering = ["beer_name"]

    def __str__(self) -> str:
        return f"{self.beer_name} ({self.beer_style})"
