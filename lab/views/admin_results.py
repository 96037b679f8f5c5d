from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from lab.permissions import IsAdminRole
from lab.serializers.results import ResultCreateSerializer, ResultUpdateSerializer
from lab.services.formatting import format_test
from lab.services.results import add_result, update_result


@api_view(['POST'])
@permission_classes([IsAdminRole])
def test_results(request):
    s = ResultCreateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    test = add_result(s.validated_data)
    return Response({
        'success': True,
        'message': 'Test result added successfully',
        'testResult': format_test(test),
    }, status=status.HTTP_201_CREATED)


@api_view(['PUT'])
@permission_classes([IsAdminRole])
def test_result_detail(request, test_id: int):
    s = ResultUpdateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    test = update_result(test_id, s.validated_data)
    return Response({
        'success': True,
        'message': 'Test result updated successfully',
        'testResult': format_test(test),
    })
