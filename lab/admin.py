"""
Django admin registrations for the lab models.

Staff accounts can inspect and correct records through ``/admin/``.
"""

from django.contrib import admin

from .models import Appointment, BloodAnalysis, Contact, HomeVisit, Notification, User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ('email', 'first_name', 'last_name', 'role', 'national_id', 'is_staff')
    list_filter = ('role', 'is_staff', 'blood_type')
    search_fields = ('email', 'first_name', 'last_name', 'national_id', 'phone')
    exclude = ('password',)
    ordering = ('-date_joined',)


@admin.register(BloodAnalysis)
class BloodAnalysisAdmin(admin.ModelAdmin):
    list_display = ('test_number', 'test_name', 'user', 'status', 'test_date')
    list_filter = ('status',)
    search_fields = ('test_number', 'test_name', 'user__email')


@admin.register(Appointment)
class AppointmentAdmin(admin.ModelAdmin):
    list_display = ('id', 'user', 'test_type', 'appointment_date', 'appointment_time', 'branch', 'status')
    list_filter = ('status', 'branch')
    search_fields = ('id', 'test_type', 'user__email')


@admin.register(HomeVisit)
class HomeVisitAdmin(admin.ModelAdmin):
    list_display = ('id', 'user', 'test_type', 'visit_date', 'visit_time', 'status')
    list_filter = ('status',)
    search_fields = ('id', 'address', 'user__email')


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = ('id', 'user', 'ntype', 'is_read', 'created_at')
    list_filter = ('ntype', 'is_read')
    search_fields = ('message', 'user__email')


@admin.register(Contact)
class ContactAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'email', 'subject', 'is_read', 'created_at')
    list_filter = ('is_read',)
    search_fields = ('name', 'email', 'subject')
