"""Admin URLs."""
from django.urls import include, path
from rest_framework.routers import SimpleRouter
from .views import (
    ActivityView,
    AdminUserViewSet,
    AdminWarrantyListView,
    AuditLogListView,
    DashboardStatsView,
)

router = SimpleRouter()
router.register(r'users', AdminUserViewSet, basename='admin-user')

urlpatterns = [
    path('', include(router.urls)),
    path('dashboard/stats/', DashboardStatsView.as_view(), name='admin-dashboard-stats'),
    path('warranties/', AdminWarrantyListView.as_view(), name='admin-warranties'),
    path('activity/', ActivityView.as_view(), name='admin-activity'),
    path('logs/', AuditLogListView.as_view(), name='admin-logs'),
]
