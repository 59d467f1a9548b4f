import time

from django.conf import settings
from django.db import connections
from django.db.utils import OperationalError
from django.http import JsonResponse

from .logger import get_logger

logger = get_logger(__name__).bind(component='common', layer='health')

API_NAME = 'E-Commerce Cart API'
API_VERSION = '1.0.0'


def _db_check(alias='default'):
    if not getattr(settings, 'PERSISTENCE_ENABLED', False):
        logger.debug('Database health check skipped; adapter disabled')
        return {'status': 'skipped', 'detail': 'DATABASE_URL not set'}
    started = time.time()
    try:
        conn = connections[alias]
        with conn.cursor() as cursor:
            cursor.execute('SELECT 1')
        latency = round((time.time() - started) * 1000, 2)
        logger.debug('Database health check succeeded', alias=alias, latency_ms=latency)
        return {'status': 'ok', 'latency_ms': latency}
    except OperationalError as e:
        logger.warning('Database health check failed', alias=alias, error=str(e))
        return {'status': 'fail', 'error': str(e)}
    except Exception as e:
        logger.error('Database health check raised', alias=alias, error=str(e), exception=e.__class__.__name__)
        return {'status': 'fail', 'error': str(e), 'exception': e.__class__.__name__}


def api_root(request):
    return JsonResponse({
        'message': API_NAME,
        'version': API_VERSION,
        'apiBaseUrl': settings.API_BASE_URL,
    })


def health(request):
    """Plain health check used by the storefront client."""
    logger.debug('Health check served')
    return JsonResponse({'status': 'ok', 'message': 'Server is running'})


def live_health(request):
    """Liveness probe: process is up and can service requests."""
    logger.debug('Liveness probe served')
    return JsonResponse({'status': 'alive'})


def ready_health(request):
    """Readiness probe: the optional database is reachable when configured.

    The API keeps serving from in-process state when the database is down, so a
    failing check reports ``degraded`` rather than blocking traffic entirely.
    """
    checks = {'database': _db_check()}
    failing = [name for name, r in checks.items() if r.get('status') == 'fail']
    overall_status = 'ok' if not failing else 'degraded'
    http_status = 200 if not failing else 503
    logger.info('Readiness probe evaluated', status=overall_status, failing_components=failing)
    return JsonResponse({'status': overall_status, 'checks': checks}, status=http_status)


def not_found(request, exception=None):
    path = getattr(request, 'path', None)
    logger.info('Route not found', path=path)
    return JsonResponse(
        {'error': 'Route not found', 'code': 'NOT_FOUND', 'status': 404},
        status=404,
    )


def server_error(request):
    logger.error('Unhandled server error outside the API layer', path=getattr(request, 'path', None))
    return JsonResponse(
        {'error': 'Server error', 'code': 'SERVER_ERROR', 'status': 500},
        status=500,
    )
