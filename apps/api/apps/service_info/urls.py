"""Service info URLs."""
from django.urls import include, path
from rest_framework.routers import SimpleRouter
from .views import ServiceInfoViewSet

router = SimpleRouter()
router.register(r'', ServiceInfoViewSet, basename='service-info')

urlpatterns = [
    path('', include(router.urls)),
]
