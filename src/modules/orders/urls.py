"""Order URL configuration."""

from __future__ import annotations

from rest_framework.routers import DefaultRouter

from modules.orders.views import BeerOrderViewSet

router = DefaultRouter(trailing_slash=True)
router.include_root_view = False
router.register("orders", BeerOrderViewSet, basename="order")

urlpatterns = router.urls
