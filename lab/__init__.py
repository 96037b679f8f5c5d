"""Lab application for the medical lab backend.

This package contains models, serializers, services, views and route
registrations implementing the customer and admin API.
"""
