from rest_framework import serializers

from lab.models import BloodAnalysis


class BloodResultsSerializer(serializers.Serializer):
    """Measured blood parameters; each one is optional."""
    hemoglobin = serializers.FloatField(required=False, allow_null=True, min_value=0)
    whiteBloodCells = serializers.FloatField(required=False, allow_null=True, min_value=0)
    redBloodCells = serializers.FloatField(required=False, allow_null=True, min_value=0)
    platelets = serializers.FloatField(required=False, allow_null=True, min_value=0)
    glucose = serializers.FloatField(required=False, allow_null=True, min_value=0)
    cholesterol = serializers.FloatField(required=False, allow_null=True, min_value=0)

    def to_internal_value(self, data):
        values = super().to_internal_value(data)
        return {k: v for k, v in values.items() if v is not None}


class ResultCreateSerializer(serializers.Serializer):
    userId = serializers.IntegerField(min_value=1)
    testName = serializers.CharField(max_length=255)
    testDate = serializers.DateTimeField(required=False)
    status = serializers.ChoiceField(choices=BloodAnalysis.STATUS_CHOICES, required=False)
    results = BloodResultsSerializer(required=False)
    notes = serializers.CharField(required=False, allow_blank=True)


class ResultUpdateSerializer(serializers.Serializer):
    testName = serializers.CharField(max_length=255, required=False)
    testDate = serializers.DateTimeField(required=False)
    status = serializers.ChoiceField(choices=BloodAnalysis.STATUS_CHOICES, required=False)
    results = BloodResultsSerializer(required=False)
    notes = serializers.CharField(required=False, allow_blank=True)
