# bookings/views.py
import logging

from rest_framework import status
from rest_framework.response import Response
from django.utils.translation import gettext_lazy as _
from drf_spectacular.utils import extend_schema, OpenApiParameter

from core.permissions import HasValidToken, IsRequestSubject
from core.views import StorageAPIView
from payments.serializers import PaymentRecordSerializer
from payments.services import PaymentService
from .serializers import (
    BookingSerializer,
    AvailableServiceSerializer,
    BookingCreateResponseSerializer,
)
from .services import BookingService, BookingNotFoundError, InvalidBookingSlotError

logger = logging.getLogger(__name__)


@extend_schema(tags=['Bookings'])
class AvailabilityView(StorageAPIView):
    public_methods = ('GET',)

    @extend_schema(
        parameters=[
            OpenApiParameter(
                name='date',
                location=OpenApiParameter.QUERY,
                description='Date label exactly as used when booking',
                required=True,
                type=str
            )
        ],
        responses={200: AvailableServiceSerializer(many=True)},
        description="Every service with the slots still free on the date"
    )
    def get(self, request):
        """
        GET /available?date=<label>
        """
        date = request.query_params.get('date', '')
        results = BookingService(self.storage).get_availability(date)
        return Response(AvailableServiceSerializer(results, many=True).data)


@extend_schema(tags=['Bookings'])
class BookingCollectionView(StorageAPIView):
    """
    GET lists one patient's bookings (token holder only), POST books a slot
    """
    permission_classes = [IsRequestSubject]
    public_methods = ('POST',)

    def get_permission_subject(self, request):
        return request.query_params.get('patient')

    @extend_schema(
        parameters=[
            OpenApiParameter(
                name='patient',
                location=OpenApiParameter.QUERY,
                description='Patient email; must match the token email',
                required=True,
                type=str
            )
        ],
        responses={
            200: BookingSerializer(many=True),
            401: {'description': 'No token'},
            403: {'description': 'Invalid token or another patient'},
        },
        description="List the authenticated patient's bookings"
    )
    def get(self, request):
        """
        GET /booking?patient=<email>
        """
        bookings = BookingService(self.storage).get_patient_bookings(
            self.get_permission_subject(request)
        )
        return Response(BookingSerializer(bookings, many=True).data)

    @extend_schema(
        request=BookingSerializer,
        responses={
            201: BookingCreateResponseSerializer,
            200: BookingCreateResponseSerializer,
            400: {'description': 'Invalid booking'},
        },
        description="Book a slot; answers success=false with the existing booking "
                    "when the patient already booked this treatment on this date"
    )
    def post(self, request):
        """
        POST /booking
        """
        serializer = BookingSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            booking, created = BookingService(self.storage).create_booking(serializer.validated_data)
        except InvalidBookingSlotError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        if not created:
            return Response({
                'success': False,
                'bookingInfoDoc': BookingSerializer(booking).data,
            }, status=status.HTTP_200_OK)

        return Response({
            'success': True,
            'result': BookingSerializer(booking).data,
        }, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Bookings'])
class BookingDetailView(StorageAPIView):
    permission_classes = [HasValidToken]

    def get_booking(self, booking_id):
        return BookingService(self.storage).get_booking(booking_id)

    @extend_schema(
        responses={200: BookingSerializer, 404: {'description': 'Booking not found'}},
        description="Fetch one booking"
    )
    def get(self, request, booking_id):
        """
        GET /booking/<id>
        """
        try:
            booking = self.get_booking(booking_id)
        except BookingNotFoundError:
            return Response({'error': _('Booking not found')}, status=status.HTTP_404_NOT_FOUND)
        return Response(BookingSerializer(booking).data)

    @extend_schema(
        request=PaymentRecordSerializer,
        responses={
            200: BookingSerializer,
            400: {'description': 'Missing transaction id'},
            404: {'description': 'Booking not found'},
        },
        description="Record the payment for a booking and mark it paid"
    )
    def patch(self, request, booking_id):
        """
        PATCH /booking/<id>
        """
        serializer = PaymentRecordSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            booking = self.get_booking(booking_id)
        except BookingNotFoundError:
            return Response({'error': _('Booking not found')}, status=status.HTTP_404_NOT_FOUND)

        booking = PaymentService(self.storage).record_payment(
            booking,
            transaction_id=serializer.validated_data['transactionId'],
            amount=serializer.validated_data.get('amount'),
            currency=serializer.validated_data.get('currency'),
        )
        return Response(BookingSerializer(booking).data, status=status.HTTP_200_OK)
