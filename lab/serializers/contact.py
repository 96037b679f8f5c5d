import bleach
from rest_framework import serializers


def _clean(v: str) -> str:
    # strip markup; bleach escapes a bare "&", which is plain text here
    return bleach.clean((v or '').strip(), tags=[], strip=True).replace('&amp;', '&').strip()


def _clean_required(v: str) -> str:
    v = _clean(v)
    if not v:
        raise serializers.ValidationError('This field may not be blank.')
    return v


class ContactSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    email = serializers.EmailField(max_length=254)
    phone = serializers.CharField(max_length=20, required=False, allow_blank=True)
    subject = serializers.CharField(max_length=255)
    message = serializers.CharField(max_length=5000)

    def validate_name(self, v):
        return _clean_required(v)

    def validate_subject(self, v):
        return _clean_required(v)

    def validate_message(self, v):
        return _clean_required(v)

    def validate_phone(self, v):
        return _clean(v)
