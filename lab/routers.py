"""
URL mappings for the lab API.

Paths follow the web client's routes exactly, without trailing slashes.
"""
from django.urls import path, include

from .views import health
from .views.auth import login_view, signup_view
from .views.users import user_dashboard, user_profile
from .views.appointments import appointment_detail, appointments
from .views.home_visits import home_visit_cancel, home_visits
from .views.blood_analysis import my_tests, test_by_number, user_tests
from .views.notifications import notification_read, notifications
from .views.contact import contact_view
from .views.admin_users import admin_settings, upload_profile, user_detail, users
from .views.admin_results import test_result_detail, test_results
from .views.admin_reports import contact_read, contacts, reports, stats
from .views.bootstrap import create_admin_view, seed_view


urlpatterns = [
    path('metrics', include('django_prometheus.urls')),
    path('healthz', health.healthz),
    # Authentication
    path('api/signup', signup_view, name='signup_view'),
    path('api/login', login_view, name='login_view'),
    # Current user
    path('api/user/profile', user_profile),
    path('api/user/dashboard', user_dashboard),
    # Bookings
    path('api/appointments', appointments),
    path('api/appointments/<int:pk>', appointment_detail),
    path('api/home-visits', home_visits),
    path('api/home-visits/<int:pk>', home_visit_cancel),
    # Results
    path('api/blood-analysis', my_tests),
    path('api/blood-analysis/result/<str:test_number>', test_by_number),
    path('api/blood-analysis/<int:user_id>', user_tests),
    # Notifications
    path('api/notifications', notifications),
    path('api/notifications/<int:pk>/read', notification_read),
    path('api/contact', contact_view),
    # Admin console
    path('api/admin/upload-profile', upload_profile),
    path('api/admin/users', users),
    path('api/admin/users/<int:user_id>', user_detail),
    path('api/admin/test-results', test_results),
    path('api/admin/test-results/<int:test_id>', test_result_detail),
    path('api/admin/stats', stats),
    path('api/admin/reports', reports),
    path('api/admin/settings', admin_settings),
    path('api/admin/contacts', contacts),
    path('api/admin/contacts/<int:pk>/read', contact_read),
    # Bootstrap (404 unless ENABLE_BOOTSTRAP_ROUTES)
    path('api/create-admin', create_admin_view),
    path('api/seed', seed_view),
]
