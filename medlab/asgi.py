"""
ASGI config for the medlab project.

The API is plain request/response, so the ASGI entrypoint only wraps the
Django HTTP application.
"""
import os

from django.core.asgi import get_asgi_application  # type: ignore

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "medlab.settings")

application = get_asgi_application()
