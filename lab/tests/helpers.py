from lab.models import ROLE_ADMIN, User
from lab.services.tokens import issue_access_token

PASSWORD = "Lab-Secure-2026!"


def make_user(email="patient@example.com", national_id="29001011234567", role="user", **extra):
    defaults = {
        "first_name": "Mona",
        "last_name": "Hassan",
        "phone": "01012345678",
    }
    defaults.update(extra)
    return User.objects.create_user(
        email=email,
        password=PASSWORD,
        national_id=national_id,
        role=role,
        **defaults,
    )


def make_admin(email="admin@lab.com", national_id="99999999999999"):
    return make_user(email=email, national_id=national_id, role=ROLE_ADMIN,
                     first_name="Lab", last_name="Admin", is_staff=True)


def bearer(client, user):
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_access_token(user)}")
    return client
