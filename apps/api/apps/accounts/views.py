"""Accounts views - own profile."""
from rest_framework import generics
from rest_framework.permissions import IsAuthenticated

from .serializers import ProfileSerializer


class ProfileView(generics.RetrieveUpdateAPIView):
    """
    GET /api/v1/users/profile/ - current user's profile
    PATCH /api/v1/users/profile/ - update display name
    """
    serializer_class = ProfileSerializer
    permission_classes = [IsAuthenticated]
    http_method_names = ['get', 'patch', 'put', 'head', 'options']

    def get_object(self):
        return self.request.user

    def update(self, request, *args, **kwargs):
        kwargs['partial'] = True
        return super().update(request, *args, **kwargs)
