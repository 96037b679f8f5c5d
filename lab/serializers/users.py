from rest_framework import serializers

from lab.models import BLOOD_TYPES


class AdminUserUpdateSerializer(serializers.Serializer):
    """Fields an administrator may overwrite on a user.

    ``role`` and ``password`` are deliberately absent: unknown keys are
    dropped by the serializer, so neither can be changed here.
    """
    firstName = serializers.CharField(max_length=150, required=False)
    lastName = serializers.CharField(max_length=150, required=False)
    email = serializers.EmailField(max_length=254, required=False)
    phone = serializers.CharField(max_length=20, required=False)
    nationalId = serializers.CharField(max_length=20, required=False)
    age = serializers.IntegerField(required=False, allow_null=True, min_value=0, max_value=150)
    bloodType = serializers.ChoiceField(choices=BLOOD_TYPES, required=False, allow_blank=True)

    def validate_email(self, v):
        return v.strip().lower()


class ListQuerySerializer(serializers.Serializer):
    q = serializers.CharField(max_length=64, required=False, allow_blank=True)
    unread = serializers.BooleanField(required=False)
    page = serializers.IntegerField(required=False, min_value=1)
    pageSize = serializers.IntegerField(required=False, min_value=1, max_value=200)


class ReportQuerySerializer(serializers.Serializer):
    type = serializers.ChoiceField(
        choices=['tests', 'appointments', 'home-visits'],
        error_messages={'invalid_choice': 'Invalid report type', 'required': 'Invalid report type'},
    )
    startDate = serializers.DateTimeField(required=False)
    endDate = serializers.DateTimeField(required=False)


class ProfileImageSerializer(serializers.Serializer):
    image = serializers.FileField()
