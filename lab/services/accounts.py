"""
User account operations shared by the auth, profile and admin views.
"""
from __future__ import annotations

import logging
from typing import Optional

from django.contrib.auth import authenticate
from django.db import transaction
from django.db.models import Q
from rest_framework.exceptions import NotFound

from lab.exceptions import ConflictError
from lab.models import Appointment, BloodAnalysis, HomeVisit, Notification, User

logger = logging.getLogger(__name__)

# camelCase API key -> model field
PROFILE_FIELDS = {
    'firstName': 'first_name',
    'lastName': 'last_name',
    'email': 'email',
    'phone': 'phone',
    'nationalId': 'national_id',
    'age': 'age',
    'bloodType': 'blood_type',
}


def _ensure_unique(email: Optional[str], national_id: Optional[str], *, exclude_id: Optional[int] = None) -> None:
    cond = Q()
    if email:
        cond |= Q(email__iexact=email)
    if national_id:
        cond |= Q(national_id=national_id)
    if not cond:
        return
    qs = User.objects.filter(cond)
    if exclude_id is not None:
        qs = qs.exclude(id=exclude_id)
    if qs.exists():
        raise ConflictError('User already exists with this email or national ID')


def register_user(data: dict) -> User:
    """Create a ``user``-role account from validated signup data."""
    _ensure_unique(data['email'], data['nationalId'])
    with transaction.atomic():
        user = User.objects.create_user(
            email=data['email'],
            password=data['password'],
            first_name=data['firstName'],
            last_name=data['lastName'],
            phone=data['phone'],
            national_id=data['nationalId'],
            age=data.get('age'),
            blood_type=data.get('bloodType') or '',
        )
    logger.info('user %s signed up', user.id)
    return user


def authenticate_user(request, email: str, password: str) -> Optional[User]:
    """Return the user for valid credentials, ``None`` otherwise.

    Unknown emails and wrong passwords are indistinguishable to the
    caller; the model backend still hashes the password for unknown
    emails so timing does not reveal which one happened.
    """
    user = authenticate(request, email=email, password=password)
    if user is None:
        logger.warning('failed login for %s', email)
    return user


def update_user(user: User, data: dict) -> User:
    _ensure_unique(data.get('email'), data.get('nationalId'), exclude_id=user.id)
    changed = []
    for key, field in PROFILE_FIELDS.items():
        if key in data:
            value = data[key]
            if field == 'blood_type' and value is None:
                value = ''
            setattr(user, field, value)
            changed.append(field)
    if changed:
        with transaction.atomic():
            user.save(update_fields=changed)
    return user


def delete_user(user_id: int) -> Optional[dict]:
    """Delete a user and every record that references it.

    Returns the number of removed rows per collection, or ``None`` when
    the user does not exist.
    """
    user = User.objects.filter(id=user_id).first()
    if user is None:
        return None
    with transaction.atomic():
        removed = {
            'bloodAnalyses': BloodAnalysis.objects.filter(user_id=user_id).delete()[0],
            'appointments': Appointment.objects.filter(user_id=user_id).delete()[0],
            'homeVisits': HomeVisit.objects.filter(user_id=user_id).delete()[0],
            'notifications': Notification.objects.filter(user_id=user_id).delete()[0],
        }
        user.delete()
    logger.info('user %s deleted with %s', user_id, removed)
    return removed


def change_password(user: User, current: str, new: str) -> bool:
    if not user.check_password(current):
        return False
    user.set_password(new)
    user.save(update_fields=['password'])
    return True


def require_user(user_id: int) -> User:
    """The stored account behind a token; 404 once it has been deleted."""
    user = User.objects.filter(id=user_id).first()
    if user is None:
        raise NotFound('User not found')
    return user
