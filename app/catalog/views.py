# catalog/views.py
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from core.views import StorageAPIView
from .serializers import ServiceNameSerializer


@extend_schema(tags=['Catalog'])
class ServiceListView(StorageAPIView):
    public_methods = ('GET',)

    @extend_schema(
        responses={200: ServiceNameSerializer(many=True)},
        description="List treatment services (names only)"
    )
    def get(self, request):
        services = self.storage.services.only('id', 'name')
        return Response(ServiceNameSerializer(services, many=True).data)
