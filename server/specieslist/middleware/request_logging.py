"""
Request logging middleware for the species catalog API
Logs API requests and responses with credentials redacted
"""
import json
import logging
import time
from django.utils.deprecation import MiddlewareMixin
from django.http import HttpRequest, HttpResponse

logger = logging.getLogger('specieslist.api')

REDACTED = '[REDACTED]'
SENSITIVE_HEADERS = {'authorization', 'cookie'}
SENSITIVE_FIELDS = {'password', 'password_confirm', 'refresh', 'access'}


def redact(body):
    """Replace credential fields in a decoded JSON body."""
    if isinstance(body, dict):
        return {
            key: REDACTED if key in SENSITIVE_FIELDS else value
            for key, value in body.items()
        }
    return body


class RequestLoggingMiddleware(MiddlewareMixin):
    """
    Log every /api/ request and its response.
    Browser pages are left alone; they already report through messages.
    """

    def process_request(self, request: HttpRequest):
        if not request.path.startswith('/api/'):
            return None

        request._start_time = time.time()

        headers = {
            key: REDACTED if key.lower() in SENSITIVE_HEADERS else value
            for key, value in request.headers.items()
        }
        logger.info(f"--> {request.method} {request.path} params={dict(request.GET)}")
        logger.debug(f"Headers: {json.dumps(headers)}")

        if request.method in ['POST', 'PUT', 'PATCH']:
            if request.content_type == 'application/json':
                try:
                    body = json.loads(request.body.decode('utf-8') or '{}')
                    logger.info(f"Body: {json.dumps(redact(body))}")
                except (ValueError, UnicodeDecodeError) as e:
                    logger.warning(f"Could not parse request body: {e}")
            else:
                logger.info(f"Body: [{request.content_type or 'unknown'} - {len(request.body)} bytes]")

        return None

    def process_response(self, request: HttpRequest, response: HttpResponse):
        if not request.path.startswith('/api/'):
            return response

        duration = 0
        if hasattr(request, '_start_time'):
            duration = (time.time() - request._start_time) * 1000  # Convert to ms

        logger.info(f"<-- {response.status_code} {request.method} {request.path} ({duration:.2f}ms)")

        content_type = response.get('Content-Type') or ''
        if 'application/json' in content_type and not getattr(response, 'streaming', False):
            try:
                body = json.loads(response.content.decode('utf-8') or 'null')
                logger.debug(f"Body: {json.dumps(redact(body))}")
            except (ValueError, UnicodeDecodeError) as e:
                logger.warning(f"Could not parse response body: {e}")

        return response

    def process_exception(self, request: HttpRequest, exception: Exception):
        if not request.path.startswith('/api/'):
            return None

        logger.error(
            f"Exception on {request.method} {request.path}: "
            f"{type(exception).__name__}: {exception}"
        )
        return None
