"""Beer URL configuration."""

from __future__ import annotations

from rest_framework.routers import DefaultRouter

from modules.beers.views import BeerViewSet

router = DefaultRouter(trailing_slash=True)
router.include_root_view = False
router.register("beers", BeerViewSet, basename="beer")

urlpatterns = router.urls
