"""
Profile image uploads for the admin console.
"""
from __future__ import annotations

import logging

from django.conf import settings
from django.db import transaction
from rest_framework.exceptions import ValidationError

from lab.models import User

logger = logging.getLogger(__name__)


def check_image(upload) -> None:
    content_type = (getattr(upload, 'content_type', '') or '').lower()
    if not any(content_type.startswith(prefix) for prefix in settings.ALLOWED_UPLOAD_TYPES):
        raise ValidationError({'image': ['Only image files are allowed']})
    if upload.size > settings.UPLOAD_MAX_MB * 1024 * 1024:
        raise ValidationError({'image': [f'File exceeds {settings.UPLOAD_MAX_MB} MB']})


def set_profile_image(user: User, upload) -> str:
    """Validate ``upload``, store it as ``user``'s profile image and
    return its storage URL.  The previous image file is removed."""
    check_image(upload)
    previous = user.profile_image.name if user.profile_image else ''
    with transaction.atomic():
        # upload_to places the file under profiles/YYYY/MM/
        user.profile_image.save(upload.name, upload, save=False)
        user.save(update_fields=['profile_image'])
    if previous and previous != user.profile_image.name:
        user.profile_image.storage.delete(previous)
    logger.info('profile image of user %s stored as %s', user.id, user.profile_image.name)
    return user.profile_image.url
