#!/usr/bin/env python
"""
Entry point for the medlab Django project.  Sets the default settings
module to ``medlab.settings`` and delegates to Django's management command
line utility.  ``runserver`` listens on ``settings.PORT`` unless an address
is given explicitly.
"""
import os
import sys


def main() -> None:
    """Run administrative tasks for the Django project."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'medlab.settings')
    try:
        from django.core.management import execute_from_command_line  # type: ignore
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc

    if len(sys.argv) > 1 and sys.argv[1] == 'runserver':
        from django.conf import settings
        from django.core.management.commands.runserver import Command as runserver

        runserver.default_port = str(settings.PORT)

    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
