from __future__ import annotations

import datetime
from typing import Optional

from django.conf import settings

from lab.models import ROLE_USER, Appointment, BloodAnalysis, Contact, HomeVisit, User
from lab.services.formatting import format_appointment, format_home_visit, format_test

REPORT_TYPES = {
    'tests': (BloodAnalysis, '-created_at', format_test),
    'appointments': (Appointment, '-appointment_date', format_appointment),
    'home-visits': (HomeVisit, '-visit_date', format_home_visit),
}


def collect_stats() -> dict:
    total_tests = BloodAnalysis.objects.count()
    return {
        'totalUsers': User.objects.filter(role=ROLE_USER).count(),
        'totalTests': total_tests,
        'pendingTests': BloodAnalysis.objects.filter(status=BloodAnalysis.STATUS_PENDING).count(),
        'totalAppointments': Appointment.objects.count(),
        'totalHomeVisits': HomeVisit.objects.count(),
        'unreadContacts': Contact.objects.filter(is_read=False).count(),
        'revenue': total_tests * settings.TEST_PRICE,
    }


def build_report(kind: str, start: Optional[datetime.datetime] = None,
                 end: Optional[datetime.datetime] = None) -> list[dict]:
    """Rows of one collection with their owners, optionally limited to a
    creation window (applied only when both bounds are given)."""
    model, ordering, fmt = REPORT_TYPES[kind]
    qs = model.objects.select_related('user')
    if start and end:
        qs = qs.filter(created_at__gte=start, created_at__lte=end)
    return [fmt(row, with_owner=True) for row in qs.order_by(ordering, '-id')]
