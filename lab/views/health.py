"""
Liveness probe and the JSON fallbacks for Django's 404/500 handlers.
"""
import logging

from django.db import DatabaseError, connections
from django.http import JsonResponse

logger = logging.getLogger(__name__)


def healthz(request):
    try:
        with connections['default'].cursor() as c:
            c.execute('SELECT 1')
            row = c.fetchone()
        return JsonResponse({'success': True, 'db': bool(row and row[0] == 1)})
    except DatabaseError:
        logger.exception('health check could not reach the database')
        return JsonResponse({'success': False, 'db': False}, status=503)


def not_found(request, exception=None):
    return JsonResponse({'success': False, 'message': 'Not found'}, status=404)


def server_error(request):
    return JsonResponse({'success': False, 'message': 'A server error occurred'}, status=500)
