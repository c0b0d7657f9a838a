"""Beer URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.beers.views import BeerViewSet

beer_list = BeerViewSet.as_view({"post": "create"})
beer_detail = BeerViewSet.as_view({"get": "retrieve", "put": "update"})

urlpatterns = [
    path("beer/", beer_list, name="beer-list"),
    path("beer/<uuid:beer_id>", beer_detail, name="beer-detail"),
]
