"""
API views for species app.
"""
import logging

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import filters, permissions, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from .models import Species
from .serializers import SpeciesListSerializer, SpeciesSerializer

logger = logging.getLogger(__name__)


class IsAuthorOrReadOnly(permissions.BasePermission):
    """
    Any signed-in user may read a species; only its author may change it.
    """
    def has_object_permission(self, request, view, obj):
        if request.method in permissions.SAFE_METHODS:
            return True
        return obj.author_id == request.user.pk


class SpeciesViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Species operations.
    Lists are unpaginated and ordered newest first unless `ordering` is given.
    """
    queryset = Species.objects.select_related('author').all()
    serializer_class = SpeciesSerializer
    permission_classes = [permissions.IsAuthenticated, IsAuthorOrReadOnly]
    pagination_class = None
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_fields = ['kingdom', 'author']
    search_fields = ['scientific_name', 'common_name']
    ordering_fields = ['id', 'scientific_name']
    ordering = ['-id']

    def get_serializer_class(self):
        """Return appropriate serializer based on action."""
        if self.action in ['list', 'mine']:
            return SpeciesListSerializer
        return SpeciesSerializer

    def perform_create(self, serializer):
        """Author is always the requesting user."""
        species = serializer.save(author=self.request.user)
        logger.info(f"User {self.request.user.pk} created species #{species.id}: {species}")

    def perform_update(self, serializer):
        species = serializer.save()
        logger.info(f"User {self.request.user.pk} updated species #{species.id}")

    def perform_destroy(self, instance):
        species_id = instance.id
        instance.delete()
        logger.info(f"User {self.request.user.pk} deleted species #{species_id}")

    @action(detail=False, methods=['get'])
    def mine(self, request):
        """Get species authored by the current user."""
        queryset = self.filter_queryset(self.get_queryset().filter(author=request.user))
        serializer = self.get_serializer(queryset, many=True)
        return Response(serializer.data)
