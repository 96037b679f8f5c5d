from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers

from lab.models import BLOOD_TYPES, User


def _check_password_strength(password: str, user=None, field: str = 'password') -> None:
    try:
        validate_password(password, user=user)
    except DjangoValidationError as e:
        raise serializers.ValidationError({field: e.messages})


class SignupSerializer(serializers.Serializer):
    firstName = serializers.CharField(max_length=150)
    lastName = serializers.CharField(max_length=150)
    email = serializers.EmailField(max_length=254)
    phone = serializers.CharField(max_length=20)
    nationalId = serializers.CharField(max_length=20)
    password = serializers.CharField(write_only=True, trim_whitespace=False)
    confirmPassword = serializers.CharField(write_only=True, trim_whitespace=False)
    age = serializers.IntegerField(required=False, allow_null=True, min_value=0, max_value=150)
    bloodType = serializers.ChoiceField(choices=BLOOD_TYPES, required=False, allow_blank=True)

    def validate_email(self, v):
        return v.strip().lower()

    def validate(self, attrs):
        if attrs['password'] != attrs['confirmPassword']:
            raise serializers.ValidationError('Passwords do not match')
        candidate = User(
            email=attrs['email'],
            first_name=attrs['firstName'],
            last_name=attrs['lastName'],
        )
        _check_password_strength(attrs['password'], user=candidate)
        return attrs


class LoginSerializer(serializers.Serializer):
    email = serializers.CharField()
    password = serializers.CharField(trim_whitespace=False)

    def validate_email(self, v):
        v = (v or '').strip().lower()
        if not v:
            raise serializers.ValidationError('Email is required')
        return v


class ChangePasswordSerializer(serializers.Serializer):
    currentPassword = serializers.CharField(trim_whitespace=False)
    newPassword = serializers.CharField(trim_whitespace=False)

    def validate(self, attrs):
        _check_password_strength(attrs['newPassword'], user=self.context.get('user'), field='newPassword')
        return attrs
