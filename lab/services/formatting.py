"""
JSON shapes of the lab entities.

Keys are camelCase to match the web client.  ``with_owner`` embeds a
short owner record (id, names, email) for admin reports and result
lookups.  Passwords never leave this module.
"""
from __future__ import annotations

from typing import Optional

from lab.models import Appointment, BloodAnalysis, Contact, HomeVisit, Notification, User

DEFAULT_PROFILE_IMAGE = '/profile-image.jpg'


def _iso(value) -> Optional[str]:
    return value.isoformat() if value else None


def profile_image_url(user: User, request=None) -> str:
    if not user.profile_image:
        return DEFAULT_PROFILE_IMAGE
    url = user.profile_image.url
    return request.build_absolute_uri(url) if request is not None else url


def format_user(user: User, request=None) -> dict:
    return {
        'id': user.id,
        'firstName': user.first_name,
        'lastName': user.last_name,
        'email': user.email,
        'phone': user.phone,
        'nationalId': user.national_id,
        'role': user.role,
        'age': user.age,
        'bloodType': user.blood_type,
        'profileImage': profile_image_url(user, request),
        'createdAt': _iso(user.date_joined),
    }


def format_owner(user: User) -> dict:
    return {
        'id': user.id,
        'firstName': user.first_name,
        'lastName': user.last_name,
        'email': user.email,
    }


def format_test(test: BloodAnalysis, with_owner: bool = False) -> dict:
    data = {
        'id': test.id,
        'userId': test.user_id,
        'testNumber': test.test_number,
        'testName': test.test_name,
        'testDate': _iso(test.test_date),
        'status': test.status,
        'results': test.results or {},
        'notes': test.notes,
        'createdAt': _iso(test.created_at),
    }
    if with_owner:
        data['user'] = format_owner(test.user)
    return data


def format_appointment(appt: Appointment, with_owner: bool = False) -> dict:
    data = {
        'id': appt.id,
        'userId': appt.user_id,
        'testType': appt.test_type,
        'appointmentDate': _iso(appt.appointment_date),
        'appointmentTime': appt.appointment_time,
        'branch': appt.branch,
        'status': appt.status,
        'createdAt': _iso(appt.created_at),
    }
    if with_owner:
        data['user'] = format_owner(appt.user)
    return data


def format_home_visit(visit: HomeVisit, with_owner: bool = False) -> dict:
    data = {
        'id': visit.id,
        'userId': visit.user_id,
        'testType': visit.test_type,
        'visitDate': _iso(visit.visit_date),
        'visitTime': visit.visit_time,
        'address': visit.address,
        'phone': visit.phone,
        'status': visit.status,
        'createdAt': _iso(visit.created_at),
    }
    if with_owner:
        data['user'] = format_owner(visit.user)
    return data


def format_notification(n: Notification) -> dict:
    return {
        'id': n.id,
        'userId': n.user_id,
        'message': n.message,
        'type': n.ntype,
        'isRead': n.is_read,
        'createdAt': _iso(n.created_at),
    }


def format_contact(c: Contact) -> dict:
    return {
        'id': c.id,
        'name': c.name,
        'email': c.email,
        'phone': c.phone,
        'subject': c.subject,
        'message': c.message,
        'isRead': c.is_read,
        'createdAt': _iso(c.created_at),
    }
