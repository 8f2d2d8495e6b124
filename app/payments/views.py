# payments/views.py
import logging

from rest_framework import status
from rest_framework.response import Response
from django.utils.translation import gettext_lazy as _
from drf_spectacular.utils import extend_schema

from core.permissions import HasValidToken
from core.views import StorageAPIView
from .providers import PaymentProviderConfigError, PaymentCreateError
from .serializers import PaymentIntentRequestSerializer, PaymentIntentResponseSerializer
from .services import PaymentService

logger = logging.getLogger(__name__)


@extend_schema(tags=['Payments'])
class CreatePaymentIntentView(StorageAPIView):
    permission_classes = [HasValidToken]

    @extend_schema(
        request=PaymentIntentRequestSerializer,
        responses={
            200: PaymentIntentResponseSerializer,
            400: {'description': 'Invalid price'},
            502: {'description': 'Payment gateway error'},
            503: {'description': 'Payment gateway not configured'},
        },
        description="Create a card payment intent and return its client secret"
    )
    def post(self, request):
        """
        POST /create-payment-intent
        """
        serializer = PaymentIntentRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            intent = PaymentService(self.storage).create_payment_intent(
                serializer.validated_data['price'],
                serializer.validated_data.get('currency'),
                metadata={'email': request.user.email},
            )
        except PaymentProviderConfigError as e:
            logger.error(f"Payment provider unavailable: {str(e)}")
            return Response({'error': _('Payments are not available')},
                            status=status.HTTP_503_SERVICE_UNAVAILABLE)
        except PaymentCreateError as e:
            return Response({'error': str(e)}, status=status.HTTP_502_BAD_GATEWAY)

        return Response({'clientSecret': intent['client_secret']}, status=status.HTTP_200_OK)
