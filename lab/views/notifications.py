from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from lab.models import Notification
from lab.services.formatting import format_notification


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def notifications(request):
    qs = Notification.objects.filter(user_id=request.user.id).order_by('-created_at', '-id')
    return Response({'success': True, 'notifications': [format_notification(n) for n in qs]})


@api_view(['PUT'])
@permission_classes([IsAuthenticated])
def notification_read(request, pk: int):
    updated = Notification.objects.filter(id=pk, user_id=request.user.id).update(is_read=True)
    if not updated:
        raise NotFound('Notification not found')
    return Response({'success': True, 'message': 'Notification marked as read'})
