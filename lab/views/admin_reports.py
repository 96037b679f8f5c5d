"""
Admin console: statistics, reports and the contact inbox.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import NotFound
from rest_framework.response import Response

from lab.models import Contact
from lab.permissions import IsAdminRole
from lab.serializers.users import ListQuerySerializer, ReportQuerySerializer
from lab.services.formatting import format_contact
from lab.services.paging import paginate
from lab.services.reports import build_report, collect_stats


@api_view(['GET'])
@permission_classes([IsAdminRole])
def stats(request):
    return Response({'success': True, 'stats': collect_stats()})


@api_view(['GET'])
@permission_classes([IsAdminRole])
def reports(request):
    s = ReportQuerySerializer(data=request.query_params)
    s.is_valid(raise_exception=True)
    params = s.validated_data
    rows = build_report(params['type'], params.get('startDate'), params.get('endDate'))
    return Response({'success': True, 'type': params['type'], 'report': rows})


@api_view(['GET'])
@permission_classes([IsAdminRole])
def contacts(request):
    s = ListQuerySerializer(data=request.query_params)
    s.is_valid(raise_exception=True)
    params = s.validated_data

    qs = Contact.objects.all()
    if params.get('unread'):
        qs = qs.filter(is_read=False)
    rows, pagination = paginate(qs.order_by('-created_at', '-id'), params.get('page'), params.get('pageSize'))
    return Response({
        'success': True,
        'contacts': [format_contact(c) for c in rows],
        'pagination': pagination,
    })


@api_view(['PUT'])
@permission_classes([IsAdminRole])
def contact_read(request, pk: int):
    if not Contact.objects.filter(id=pk).update(is_read=True):
        raise NotFound('Contact message not found')
    return Response({'success': True, 'message': 'Contact message marked as read'})
