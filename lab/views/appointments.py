"""
Lab appointment booking.

Every query is scoped to the signed-in user; another user's appointment
is reported as not found.  Cancelling keeps the row and only flips its
status.
"""
from __future__ import annotations

from django.db import transaction
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from lab.models import BOOKING_CANCELLED, Appointment
from lab.serializers.bookings import AppointmentCreateSerializer, AppointmentUpdateSerializer
from lab.services.accounts import require_user
from lab.services.formatting import format_appointment
from lab.services.notifications import notify_booking

# camelCase API key -> model field
UPDATABLE = {
    'testType': 'test_type',
    'appointmentDate': 'appointment_date',
    'appointmentTime': 'appointment_time',
    'branch': 'branch',
    'status': 'status',
}


def _own_appointment(request, pk: int) -> Appointment:
    appt = Appointment.objects.filter(id=pk, user_id=request.user.id).first()
    if appt is None:
        raise NotFound('Appointment not found')
    return appt


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def appointments(request):
    user_id = request.user.id
    if request.method == 'GET':
        qs = Appointment.objects.filter(user_id=user_id).order_by('-appointment_date', '-id')
        return Response({'success': True, 'appointments': [format_appointment(a) for a in qs]})

    require_user(user_id)
    s = AppointmentCreateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    vd = s.validated_data
    with transaction.atomic():
        appt = Appointment.objects.create(
            user_id=user_id,
            test_type=vd['testType'],
            appointment_date=vd['appointmentDate'],
            appointment_time=vd['appointmentTime'],
            branch=vd['branch'],
        )
        notify_booking(user_id, what='appointment', test_type=appt.test_type,
                       time=appt.appointment_time, date=appt.appointment_date)
    return Response({
        'success': True,
        'message': 'Appointment booked successfully',
        'appointment': format_appointment(appt),
    }, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT', 'DELETE'])
@permission_classes([IsAuthenticated])
def appointment_detail(request, pk: int):
    appt = _own_appointment(request, pk)
    if request.method == 'GET':
        return Response({'success': True, 'appointment': format_appointment(appt)})

    if request.method == 'PUT':
        s = AppointmentUpdateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        changed = []
        for key, field in UPDATABLE.items():
            if key in s.validated_data:
                setattr(appt, field, s.validated_data[key])
                changed.append(field)
        if changed:
            appt.save(update_fields=changed)
        return Response({
            'success': True,
            'message': 'Appointment updated successfully',
            'appointment': format_appointment(appt),
        })

    # DELETE cancels
    appt.status = BOOKING_CANCELLED
    appt.save(update_fields=['status'])
    return Response({'success': True, 'message': 'Appointment cancelled successfully'})
