"""
HTTP counterparts of the ``create_admin`` and ``seed_data`` commands.

They exist only while ``ENABLE_BOOTSTRAP_ROUTES`` is on; otherwise the
routes answer 404 as if they were not mounted.  ``create-admin`` always
targets the default admin email; other admin accounts are created with
the management command.
"""
from __future__ import annotations

from django.conf import settings
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.exceptions import NotFound
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from lab.services.bootstrap import DEFAULT_ADMIN_EMAIL, ensure_admin, seed_demo_data


def _require_enabled() -> None:
    if not settings.ENABLE_BOOTSTRAP_ROUTES:
        raise NotFound('Not found')


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def create_admin_view(request):
    _require_enabled()
    user, created, generated = ensure_admin(
        email=DEFAULT_ADMIN_EMAIL,
        password=request.data.get('password') or None,
    )
    payload = {
        'success': True,
        'message': 'Admin created successfully' if created else 'Admin already exists',
        'created': created,
        'email': user.email,
    }
    if generated:
        payload['password'] = generated
    return Response(payload)


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def seed_view(request):
    _require_enabled()
    created = seed_demo_data()
    return Response({'success': True, 'message': 'Sample data created successfully', 'created': created})
