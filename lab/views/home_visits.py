from __future__ import annotations

from django.db import transaction
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from lab.models import BOOKING_CANCELLED, HomeVisit
from lab.serializers.bookings import HomeVisitCreateSerializer
from lab.services.accounts import require_user
from lab.services.formatting import format_home_visit
from lab.services.notifications import notify_booking


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def home_visits(request):
    user_id = request.user.id
    if request.method == 'GET':
        qs = HomeVisit.objects.filter(user_id=user_id).order_by('-visit_date', '-id')
        return Response({'success': True, 'homeVisits': [format_home_visit(v) for v in qs]})

    require_user(user_id)
    s = HomeVisitCreateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    vd = s.validated_data
    with transaction.atomic():
        visit = HomeVisit.objects.create(
            user_id=user_id,
            test_type=vd['testType'],
            visit_date=vd['visitDate'],
            visit_time=vd['visitTime'],
            address=vd['address'],
            phone=vd['phone'],
        )
        notify_booking(user_id, what='home visit', test_type=visit.test_type,
                       time=visit.visit_time, date=visit.visit_date)
    return Response({
        'success': True,
        'message': 'Home visit booked successfully',
        'homeVisit': format_home_visit(visit),
    }, status=status.HTTP_201_CREATED)


@api_view(['DELETE'])
@permission_classes([IsAuthenticated])
def home_visit_cancel(request, pk: int):
    visit = HomeVisit.objects.filter(id=pk, user_id=request.user.id).first()
    if visit is None:
        raise NotFound('Home visit not found')
    visit.status = BOOKING_CANCELLED
    visit.save(update_fields=['status'])
    return Response({'success': True, 'message': 'Home visit cancelled successfully'})
