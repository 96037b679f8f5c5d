"""
Blood test result entry for administrators.

Each new or changed result notifies its owner in the same transaction.
"""
from __future__ import annotations

import logging
import secrets
import time

from django.db import transaction
from rest_framework.exceptions import NotFound

from lab.exceptions import ConflictError
from lab.models import BloodAnalysis, User
from lab.services.notifications import notify_result

logger = logging.getLogger(__name__)

TEST_NUMBER_ATTEMPTS = 5

# camelCase API key -> model field
RESULT_FIELDS = {
    'testName': 'test_name',
    'testDate': 'test_date',
    'status': 'status',
    'results': 'results',
    'notes': 'notes',
}


def generate_test_number() -> str:
    return f"TEST-{int(time.time() * 1000)}-{secrets.randbelow(1000)}"


def allocate_test_number() -> str:
    for _ in range(TEST_NUMBER_ATTEMPTS):
        number = generate_test_number()
        if not BloodAnalysis.objects.filter(test_number=number).exists():
            return number
    raise ConflictError('Could not allocate a unique test number')


def add_result(data: dict) -> BloodAnalysis:
    owner = User.objects.filter(id=data['userId']).first()
    if owner is None:
        raise NotFound('User not found')
    fields = {field: data[key] for key, field in RESULT_FIELDS.items() if key in data}
    fields.setdefault('status', BloodAnalysis.STATUS_READY)
    with transaction.atomic():
        test = BloodAnalysis.objects.create(user=owner, test_number=allocate_test_number(), **fields)
        notify_result(owner.id, test.test_name)
    logger.info('result %s added for user %s', test.test_number, owner.id)
    return test


def update_result(test_id: int, data: dict) -> BloodAnalysis:
    test = BloodAnalysis.objects.filter(id=test_id).first()
    if test is None:
        raise NotFound('Test result not found')
    changed = []
    for key, field in RESULT_FIELDS.items():
        if key in data:
            setattr(test, field, data[key])
            changed.append(field)
    with transaction.atomic():
        if changed:
            test.save(update_fields=changed)
        notify_result(test.user_id, test.test_name, updated=True)
    return test
