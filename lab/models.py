"""
Database models for the medical lab backend.

Six collections back the API: users, blood analyses, lab appointments,
home visits, notifications and contact messages.  Every per-user record
cascades away with its owner; nothing else is ever hard-deleted.
"""
from __future__ import annotations

import datetime
import os
import uuid

from django.contrib.auth.models import AbstractUser, BaseUserManager
from django.db import models
from django.utils import timezone


ROLE_USER = 'user'
ROLE_ADMIN = 'admin'

BOOKING_SCHEDULED = 'scheduled'
BOOKING_COMPLETED = 'completed'
BOOKING_CANCELLED = 'cancelled'
BOOKING_STATUS_CHOICES = [
    (BOOKING_SCHEDULED, 'Scheduled'),
    (BOOKING_COMPLETED, 'Completed'),
    (BOOKING_CANCELLED, 'Cancelled'),
]

BLOOD_TYPES = ['A+', 'A-', 'B+', 'B-', 'AB+', 'AB-', 'O+', 'O-']


def profile_upload_to(instance, filename: str) -> str:
    ext = os.path.splitext(filename)[1].lower()
    return f"profiles/{datetime.date.today().strftime('%Y/%m')}/{uuid.uuid4().hex}{ext}"


class UserManager(BaseUserManager):
    """Manager for the email-identified :class:`User`."""
    use_in_migrations = True

    def _create_user(self, email, password, **extra_fields):
        if not email:
            raise ValueError('The email must be set')
        email = self.normalize_email(email).lower()
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_user(self, email, password=None, **extra_fields):
        extra_fields.setdefault('role', ROLE_USER)
        extra_fields.setdefault('is_staff', False)
        extra_fields.setdefault('is_superuser', False)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('role', ROLE_ADMIN)
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True.')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True.')
        return self._create_user(email, password, **extra_fields)


class User(AbstractUser):
    """A lab customer or administrator, identified by email.

    ``role`` drives API authorization ('user' or 'admin'); ``is_staff``
    only controls access to the Django admin site.  Email and national ID
    are unique across the system.
    """
    ROLE_CHOICES = [
        (ROLE_USER, 'User'),
        (ROLE_ADMIN, 'Administrator'),
    ]

    username = None
    email = models.EmailField(unique=True)
    phone = models.CharField(max_length=20)
    national_id = models.CharField(max_length=20, unique=True)
    role = models.CharField(max_length=10, choices=ROLE_CHOICES, default=ROLE_USER, db_index=True)
    age = models.PositiveIntegerField(null=True, blank=True)
    blood_type = models.CharField(max_length=3, blank=True)
    profile_image = models.FileField(upload_to=profile_upload_to, max_length=255, blank=True)

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['first_name', 'last_name', 'phone', 'national_id']

    objects = UserManager()

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN

    def __str__(self) -> str:
        return f"{self.email} ({self.role})"


class BloodAnalysis(models.Model):
    """A blood test with its measured values.

    ``results`` holds the numeric readings keyed by parameter name
    (hemoglobin, whiteBloodCells, redBloodCells, platelets, glucose,
    cholesterol); absent parameters were not measured.
    """
    STATUS_PENDING = 'pending'
    STATUS_READY = 'ready'
    STATUS_PROCESSING = 'processing'
    STATUS_CHOICES = [
        (STATUS_PENDING, 'Pending'),
        (STATUS_READY, 'Ready'),
        (STATUS_PROCESSING, 'Processing'),
    ]

    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='blood_analyses')
    test_number = models.CharField(max_length=64, unique=True)
    test_name = models.CharField(max_length=255)
    test_date = models.DateTimeField(default=timezone.now)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_READY, db_index=True)
    results = models.JSONField(default=dict, blank=True)
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name_plural = 'blood analyses'
        indexes = [
            models.Index(fields=['user', 'created_at'], name='lab_blood_user_created_idx'),
        ]

    def __str__(self) -> str:
        return f"{self.test_number} {self.test_name}"


class Appointment(models.Model):
    """An in-branch lab appointment."""
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='appointments')
    test_type = models.CharField(max_length=255)
    appointment_date = models.DateField()
    appointment_time = models.CharField(max_length=32)
    branch = models.CharField(max_length=255)
    status = models.CharField(max_length=20, choices=BOOKING_STATUS_CHOICES, default=BOOKING_SCHEDULED)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=['user', 'appointment_date'], name='lab_appt_user_date_idx'),
        ]

    def __str__(self) -> str:
        return f"{self.test_type} @ {self.branch} {self.appointment_date} {self.appointment_time}"


class HomeVisit(models.Model):
    """A sample collection visit at the customer's address."""
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='home_visits')
    test_type = models.CharField(max_length=255)
    visit_date = models.DateField()
    visit_time = models.CharField(max_length=32)
    address = models.CharField(max_length=500)
    phone = models.CharField(max_length=20)
    status = models.CharField(max_length=20, choices=BOOKING_STATUS_CHOICES, default=BOOKING_SCHEDULED)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=['user', 'visit_date'], name='lab_visit_user_date_idx'),
        ]

    def __str__(self) -> str:
        return f"{self.test_type} at {self.address} {self.visit_date} {self.visit_time}"


class Notification(models.Model):
    TYPE_TEST_RESULT = 'test_result'
    TYPE_APPOINTMENT = 'appointment'
    TYPE_GENERAL = 'general'
    TYPE_CHOICES = [
        (TYPE_TEST_RESULT, 'Test result'),
        (TYPE_APPOINTMENT, 'Appointment'),
        (TYPE_GENERAL, 'General'),
    ]

    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='notifications')
    message = models.TextField()
    ntype = models.CharField(max_length=20, choices=TYPE_CHOICES)
    is_read = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=['user', 'is_read', 'created_at'], name='lab_notif_user_read_idx'),
        ]

    def __str__(self) -> str:
        return f"{self.ntype} -> {self.user_id}"


class Contact(models.Model):
    """A message left through the public contact form."""
    name = models.CharField(max_length=255)
    email = models.EmailField()
    phone = models.CharField(max_length=20, blank=True)
    subject = models.CharField(max_length=255)
    message = models.TextField()
    is_read = models.BooleanField(default=False, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self) -> str:
        return f"{self.subject} ({self.email})"
