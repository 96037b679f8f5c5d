"""
Rate limits for the public endpoints.

Rates come from ``REST_FRAMEWORK['DEFAULT_THROTTLE_RATES']`` under the
scope names below; counters live in the default cache.
"""
from rest_framework.throttling import AnonRateThrottle


class LoginThrottle(AnonRateThrottle):
    scope = 'login'


class SignupThrottle(AnonRateThrottle):
    scope = 'signup'


class ContactThrottle(AnonRateThrottle):
    scope = 'contact'
