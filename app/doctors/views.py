# doctors/views.py
from rest_framework import status
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from core.permissions import IsAdminRole
from core.views import StorageAPIView
from .serializers import (
    DoctorSerializer,
    DoctorCreateResponseSerializer,
    DoctorDeleteResponseSerializer,
)
from .services import DoctorService


@extend_schema(tags=['Doctors'])
class DoctorCollectionView(StorageAPIView):
    permission_classes = [IsAdminRole]

    @extend_schema(
        responses={200: DoctorSerializer(many=True), 403: {'description': 'Admins only'}},
        description="List doctors (admins only)"
    )
    def get(self, request):
        return Response(DoctorSerializer(DoctorService(self.storage).list_doctors(), many=True).data)

    @extend_schema(
        request=DoctorSerializer,
        responses={201: DoctorCreateResponseSerializer, 200: DoctorCreateResponseSerializer},
        description="Add a doctor unless the email is already on the roster (admins only)"
    )
    def post(self, request):
        serializer = DoctorSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        doctor, created = DoctorService(self.storage).add_doctor(serializer.validated_data)
        if not created:
            return Response({
                'success': False,
                'doctor': DoctorSerializer(doctor).data,
            }, status=status.HTTP_200_OK)

        return Response({
            'success': True,
            'result': DoctorSerializer(doctor).data,
        }, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Doctors'])
class DoctorDeleteView(StorageAPIView):
    public_methods = ('DELETE',)

    @extend_schema(
        responses={200: DoctorDeleteResponseSerializer},
        description="Remove a doctor by email"
    )
    def delete(self, request, email):
        deleted = DoctorService(self.storage).remove_doctor(email)
        return Response({'deletedCount': deleted}, status=status.HTTP_200_OK)
