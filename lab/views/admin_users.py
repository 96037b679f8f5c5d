"""
Admin console: user management, profile uploads and the admin's own
password.
"""
from __future__ import annotations

from django.db.models import Q
from rest_framework import status
from rest_framework.decorators import api_view, parser_classes, permission_classes
from rest_framework.exceptions import NotFound
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.response import Response

from lab.models import ROLE_USER, User
from lab.permissions import IsAdminRole
from lab.serializers.auth import ChangePasswordSerializer
from lab.serializers.users import AdminUserUpdateSerializer, ListQuerySerializer, ProfileImageSerializer
from lab.services.accounts import change_password, delete_user, require_user, update_user
from lab.services.formatting import format_user
from lab.services.paging import paginate
from lab.services.uploads import set_profile_image


@api_view(['POST'])
@permission_classes([IsAdminRole])
@parser_classes([MultiPartParser, FormParser])
def upload_profile(request):
    """Store the calling admin's profile image."""
    admin = require_user(request.user.id)
    s = ProfileImageSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    url = set_profile_image(admin, s.validated_data['image'])
    return Response({'success': True, 'imageUrl': request.build_absolute_uri(url)})


@api_view(['GET'])
@permission_classes([IsAdminRole])
def users(request):
    """Customer accounts, optionally filtered by ``q`` and paginated."""
    s = ListQuerySerializer(data=request.query_params)
    s.is_valid(raise_exception=True)
    params = s.validated_data

    qs = User.objects.filter(role=ROLE_USER)
    q = (params.get('q') or '').strip()
    if q:
        qs = qs.filter(
            Q(first_name__icontains=q) | Q(last_name__icontains=q)
            | Q(email__icontains=q) | Q(national_id__icontains=q)
        )
    rows, pagination = paginate(qs.order_by('-date_joined', '-id'), params.get('page'), params.get('pageSize'))
    return Response({
        'success': True,
        'users': [format_user(u, request) for u in rows],
        'pagination': pagination,
    })


@api_view(['PUT', 'DELETE'])
@permission_classes([IsAdminRole])
def user_detail(request, user_id: int):
    if request.method == 'DELETE':
        removed = delete_user(user_id)
        if removed is None:
            raise NotFound('User not found')
        return Response({'success': True, 'message': 'User deleted successfully', 'deleted': removed})

    user = User.objects.filter(id=user_id).first()
    if user is None:
        raise NotFound('User not found')
    s = AdminUserUpdateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    user = update_user(user, s.validated_data)
    return Response({'success': True, 'message': 'User updated successfully', 'user': format_user(user, request)})


@api_view(['PUT'])
@permission_classes([IsAdminRole])
def admin_settings(request):
    admin = require_user(request.user.id)
    s = ChangePasswordSerializer(data=request.data, context={'user': admin})
    s.is_valid(raise_exception=True)
    if not change_password(admin, s.validated_data['currentPassword'], s.validated_data['newPassword']):
        return Response({'success': False, 'message': 'Current password is incorrect'}, status=status.HTTP_400_BAD_REQUEST)
    return Response({'success': True, 'message': 'Password updated successfully'})
