"""
Endpoints for the signed-in user's own profile and dashboard.
"""
from __future__ import annotations

from django.utils import timezone
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from lab.models import Appointment, BloodAnalysis, Notification, User
from lab.services.formatting import format_appointment, format_notification, format_test, format_user


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def user_profile(request):
    user = User.objects.filter(id=request.user.id).first()
    if user is None:
        raise NotFound('User not found')
    return Response({'success': True, 'user': format_user(user, request)})


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def user_dashboard(request):
    """Recent tests, upcoming appointments, latest notifications and the
    counters shown on the customer dashboard."""
    user_id = request.user.id
    today = timezone.localdate()

    tests = BloodAnalysis.objects.filter(user_id=user_id)
    upcoming = Appointment.objects.filter(user_id=user_id, appointment_date__gte=today)
    notifications = Notification.objects.filter(user_id=user_id)

    return Response({
        'success': True,
        'data': {
            'recentTests': [format_test(t) for t in tests.order_by('-created_at', '-id')[:3]],
            'upcomingAppointments': [format_appointment(a) for a in upcoming.order_by('appointment_date', 'id')[:3]],
            'notifications': [format_notification(n) for n in notifications.order_by('-created_at', '-id')[:5]],
            'counts': {
                'tests': tests.count(),
                'appointments': upcoming.count(),
                'reports': tests.filter(status=BloodAnalysis.STATUS_READY).count(),
                'notifications': notifications.filter(is_read=False).count(),
            },
        },
    })
