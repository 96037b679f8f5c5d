"""
Operational bootstrap: first administrator and demo data.

Used by the ``create_admin`` and ``seed_data`` management commands and,
when ``ENABLE_BOOTSTRAP_ROUTES`` is on, by their HTTP counterparts.
"""
from __future__ import annotations

import datetime
import logging
import secrets
from typing import Optional

from django.db import transaction
from django.utils import timezone

from lab.exceptions import ConflictError
from lab.models import ROLE_ADMIN, ROLE_USER, Appointment, BloodAnalysis, Notification, User
from lab.services.results import allocate_test_number

logger = logging.getLogger(__name__)

DEFAULT_ADMIN_EMAIL = 'admin@lab.com'


def ensure_admin(*, email: str = DEFAULT_ADMIN_EMAIL, password: Optional[str] = None,
                 first_name: str = 'Lab', last_name: str = 'Admin',
                 phone: str = '01000000000', national_id: str = '99999999999999') -> tuple[User, bool, Optional[str]]:
    """Create the admin account unless it already exists (idempotent).

    An existing non-admin account with the same email, or any account
    holding the national ID, is left untouched and raises
    :class:`ConflictError`; no account is ever promoted here.

    Returns ``(user, created, password)``; ``password`` is the generated
    one when none was supplied and the account was created, else None.
    """
    email = email.strip().lower()
    existing = User.objects.filter(email=email).first()
    if existing is not None:
        if existing.role != ROLE_ADMIN:
            logger.warning('refused to create admin %s: email belongs to a regular account', email)
            raise ConflictError('User already exists with this email or national ID')
        return existing, False, None
    if User.objects.filter(national_id=national_id).exists():
        raise ConflictError('User already exists with this email or national ID')

    generated = None
    if not password:
        generated = password = secrets.token_urlsafe(12)
    with transaction.atomic():
        user = User.objects.create_user(
            email=email,
            password=password,
            first_name=first_name,
            last_name=last_name,
            phone=phone,
            national_id=national_id,
            role=ROLE_ADMIN,
            is_staff=True,
        )
    logger.info('admin account %s created', email)
    return user, True, generated


def _aware(y: int, m: int, d: int) -> datetime.datetime:
    return timezone.make_aware(datetime.datetime(y, m, d, 9, 0))


def seed_demo_data() -> dict:
    """Attach sample tests, one appointment and notifications to the first
    regular user.  Returns created counts (all zero if there is no user)."""
    created = {'tests': 0, 'appointments': 0, 'notifications': 0}
    user = User.objects.filter(role=ROLE_USER).order_by('id').first()
    if user is None:
        return created

    samples = [
        ('Complete Blood Count', _aware(2023, 4, 10), {
            'hemoglobin': 14.5, 'whiteBloodCells': 7.2, 'redBloodCells': 4.8, 'platelets': 250,
        }),
        ('Liver Function Test', _aware(2023, 4, 5), {'glucose': 95, 'cholesterol': 180}),
        ('Thyroid Hormone Panel', _aware(2023, 4, 1), {}),
    ]
    with transaction.atomic():
        for name, when, results in samples:
            BloodAnalysis.objects.create(
                user=user,
                test_number=allocate_test_number(),
                test_name=name,
                test_date=when,
                status=BloodAnalysis.STATUS_READY,
                results=results,
            )
            created['tests'] += 1

        Appointment.objects.create(
            user=user,
            test_type='Comprehensive Blood Test',
            appointment_date=timezone.localdate() + datetime.timedelta(days=7),
            appointment_time='10:30 AM',
            branch='Nasr City Branch',
        )
        created['appointments'] += 1

        for message, ntype in [
            ('Your complete blood count results are ready', Notification.TYPE_TEST_RESULT),
            ('Reminder: you have an upcoming appointment next week at 10:30 AM', Notification.TYPE_APPOINTMENT),
        ]:
            Notification.objects.create(user=user, message=message, ntype=ntype)
            created['notifications'] += 1
    logger.info('seeded demo data for user %s: %s', user.id, created)
    return created
