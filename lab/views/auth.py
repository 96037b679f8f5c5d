"""
Signup and login.

Both endpoints are public: authentication is switched off for them so a
stale token in the header never blocks a fresh login.  Each success
returns a bearer token together with the user (never the password).
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, authentication_classes, permission_classes, throttle_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from lab.serializers.auth import LoginSerializer, SignupSerializer
from lab.services.accounts import authenticate_user, register_user
from lab.services.formatting import format_user
from lab.services.tokens import issue_access_token
from lab.throttles import LoginThrottle, SignupThrottle

INVALID_CREDENTIALS = 'Invalid credentials'


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
@throttle_classes([SignupThrottle])
def signup_view(request):
    s = SignupSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    user = register_user(s.validated_data)
    return Response({
        'success': True,
        'message': 'Account created successfully',
        'token': issue_access_token(user),
        'user': format_user(user, request),
    }, status=status.HTTP_201_CREATED)


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
@throttle_classes([LoginThrottle])
def login_view(request):
    """Email/password login.

    Unknown email and wrong password produce the same 400 response.
    """
    s = LoginSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    user = authenticate_user(request, s.validated_data['email'], s.validated_data['password'])
    if user is None:
        return Response({'success': False, 'message': INVALID_CREDENTIALS}, status=status.HTTP_400_BAD_REQUEST)
    return Response({
        'success': True,
        'message': 'Logged in successfully',
        'token': issue_access_token(user),
        'user': format_user(user, request),
    })
