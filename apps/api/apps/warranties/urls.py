"""Warranty URLs."""
from django.urls import include, path
from rest_framework.routers import SimpleRouter
from .views import WarrantyViewSet

router = SimpleRouter()
router.register(r'', WarrantyViewSet, basename='warranty')

urlpatterns = [
    path('', include(router.urls)),
]
