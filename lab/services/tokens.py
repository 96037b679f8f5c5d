from rest_framework_simplejwt.tokens import AccessToken

from lab.models import User


def issue_access_token(user: User) -> str:
    """Signed access token carrying the user's id, email and role."""
    token = AccessToken.for_user(user)
    token['email'] = user.email
    token['role'] = user.role
    return str(token)
