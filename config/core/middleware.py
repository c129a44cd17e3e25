import logging
import time

logger = logging.getLogger('bookstore.requests')


class RequestTimingMiddleware:
    """Logs 'METHOD path - status - Nms' once the response is ready."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        started = time.monotonic()
        response = self.get_response(request)
        duration_ms = int((time.monotonic() - started) * 1000)
        logger.info(
            '%s %s - %s - %dms - IP: %s',
            request.method,
            request.get_full_path(),
            response.status_code,
            duration_ms,
            request.META.get('REMOTE_ADDR', '-'),
        )
        return response
