import logging

from django.db import DatabaseError, connections
from django.http import JsonResponse
from django.views.decorators.http import require_GET

logger = logging.getLogger(__name__)


@require_GET
def healthz(request):
    """Liveness probe: the app is healthy when the default database answers."""
    try:
        with connections['default'].cursor() as cursor:
            cursor.execute('SELECT 1')
            row = cursor.fetchone()
    except DatabaseError as exc:
        logger.error('Health check failed: %s', exc)
        return JsonResponse({'ok': False, 'db': False, 'error': str(exc)}, status=503)
    return JsonResponse({'ok': True, 'db': bool(row and row[0] == 1)})
