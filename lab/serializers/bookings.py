from django.utils import timezone
from rest_framework import serializers
from rest_framework.settings import ISO_8601

from lab.models import BOOKING_STATUS_CHOICES

# Browsers send either a bare date or a full ISO timestamp
DATE_INPUT_FORMATS = [ISO_8601, '%Y-%m-%dT%H:%M:%S.%fZ', '%Y-%m-%dT%H:%M:%SZ', '%Y-%m-%dT%H:%M:%S']


def _not_in_past(value, message):
    if value < timezone.localdate():
        raise serializers.ValidationError(message)
    return value


class AppointmentCreateSerializer(serializers.Serializer):
    testType = serializers.CharField(max_length=255)
    appointmentDate = serializers.DateField(input_formats=DATE_INPUT_FORMATS)
    appointmentTime = serializers.CharField(max_length=32)
    branch = serializers.CharField(max_length=255)

    def validate_appointmentDate(self, v):
        return _not_in_past(v, 'Cannot book an appointment on a past date')


class AppointmentUpdateSerializer(serializers.Serializer):
    testType = serializers.CharField(max_length=255, required=False)
    appointmentDate = serializers.DateField(input_formats=DATE_INPUT_FORMATS, required=False)
    appointmentTime = serializers.CharField(max_length=32, required=False)
    branch = serializers.CharField(max_length=255, required=False)
    status = serializers.ChoiceField(choices=BOOKING_STATUS_CHOICES, required=False)


class HomeVisitCreateSerializer(serializers.Serializer):
    testType = serializers.CharField(max_length=255)
    visitDate = serializers.DateField(input_formats=DATE_INPUT_FORMATS)
    visitTime = serializers.CharField(max_length=32)
    address = serializers.CharField(max_length=500)
    phone = serializers.CharField(max_length=20)

    def validate_visitDate(self, v):
        return _not_in_past(v, 'Cannot book a home visit on a past date')
