"""
Health check endpoints for the species catalog
"""
import time
from typing import Dict, Any

from django.conf import settings
from django.db import DatabaseError, connection
from django.http import JsonResponse
from django.views.decorators.cache import never_cache
from django.views.decorators.http import require_http_methods


@never_cache
@require_http_methods(["GET", "HEAD"])
def health_check(request) -> JsonResponse:
    """
    Health check for monitoring.

    Returns JSON with the overall status, the database check and its
    response time. Responds 503 when the database is unreachable.
    """
    health_status: Dict[str, Any] = {
        'status': 'healthy',
        'timestamp': time.time(),
        'checks': {},
        'metadata': {
            'debug': settings.DEBUG,
        }
    }

    db_start = time.time()
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
        health_status['checks']['database'] = {
            'status': 'healthy',
            'response_time_ms': round((time.time() - db_start) * 1000, 2)
        }
    except DatabaseError as e:
        health_status['checks']['database'] = {
            'status': 'unhealthy',
            'error': str(e),
            'response_time_ms': round((time.time() - db_start) * 1000, 2)
        }
        health_status['status'] = 'unhealthy'

    status_code = 200 if health_status['status'] == 'healthy' else 503
    return JsonResponse(health_status, status=status_code)


@never_cache
@require_http_methods(["GET", "HEAD"])
def liveness_check(request) -> JsonResponse:
    """Process is up; no dependencies checked."""
    return JsonResponse({'status': 'alive'})
