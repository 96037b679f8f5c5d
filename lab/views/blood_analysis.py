"""
Blood test results as seen by their owners.

Administrators may read any user's results; everybody else only their
own, and a foreign record is reported as not found.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from lab.models import BloodAnalysis
from lab.permissions import is_admin
from lab.services.formatting import format_test


def _tests_of(user_id: int):
    return BloodAnalysis.objects.filter(user_id=user_id).order_by('-created_at', '-id')


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def my_tests(request):
    return Response({'success': True, 'tests': [format_test(t) for t in _tests_of(request.user.id)]})


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def user_tests(request, user_id: int):
    if not is_admin(request.user) and user_id != request.user.id:
        raise NotFound('Test results not found')
    return Response({'success': True, 'tests': [format_test(t) for t in _tests_of(user_id)]})


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def test_by_number(request, test_number: str):
    qs = BloodAnalysis.objects.select_related('user').filter(test_number=test_number)
    if not is_admin(request.user):
        qs = qs.filter(user_id=request.user.id)
    test = qs.first()
    if test is None:
        raise NotFound('Test result not found')
    return Response({'success': True, 'test': format_test(test, with_owner=True)})
