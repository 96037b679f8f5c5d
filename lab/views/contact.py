"""
Public contact form.
"""
import logging

from rest_framework import status
from rest_framework.decorators import api_view, authentication_classes, permission_classes, throttle_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from lab.models import Contact
from lab.serializers.contact import ContactSerializer
from lab.throttles import ContactThrottle

logger = logging.getLogger(__name__)


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
@throttle_classes([ContactThrottle])
def contact_view(request):
    s = ContactSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    vd = s.validated_data
    msg = Contact.objects.create(
        name=vd['name'],
        email=vd['email'],
        phone=vd.get('phone', ''),
        subject=vd['subject'],
        message=vd['message'],
    )
    logger.info('contact message %s received', msg.id)
    return Response({'success': True, 'message': 'Your message has been sent successfully'},
                    status=status.HTTP_201_CREATED)
