"""
Bearer token authentication.

Tokens are stateless HS256 JWTs issued by :mod:`lab.services.tokens`.
A request without a bearer token stays anonymous so that protected
views answer 401; a token that is present but fails verification is
rejected outright with 403.  The authenticated principal is built from
the token claims alone, without a database lookup.
"""
from __future__ import annotations

from django.utils.functional import cached_property
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.authentication import JWTStatelessUserAuthentication
from rest_framework_simplejwt.models import TokenUser
from rest_framework_simplejwt.settings import api_settings

from .exceptions import InvalidTokenError
from .models import ROLE_ADMIN, ROLE_USER


class LabTokenUser(TokenUser):
    """Principal carrying the ``userId``/``email``/``role`` token claims."""

    @cached_property
    def id(self) -> int:
        return int(self.token[api_settings.USER_ID_CLAIM])

    @cached_property
    def email(self) -> str:
        return self.token.get('email', '')

    @cached_property
    def role(self) -> str:
        return self.token.get('role', ROLE_USER)

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN


class BearerTokenAuthentication(JWTStatelessUserAuthentication):
    """``Authorization: <scheme> <token>`` authentication.

    A header without a credential part counts as no token.  Any credential
    that cannot be verified, including one sent under another scheme or
    followed by extra parts, is rejected with 403.
    """

    www_authenticate_realm = 'api'

    def authenticate(self, request):
        header = self.get_header(request)
        if header is None or len(header.split()) < 2:
            return None
        try:
            result = super().authenticate(request)
        except AuthenticationFailed as exc:
            raise InvalidTokenError() from exc
        if result is None:
            # unknown scheme
            raise InvalidTokenError()
        return result
