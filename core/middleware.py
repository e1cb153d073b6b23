import logging
import time

logger = logging.getLogger(__name__)


class RequestLogMiddleware:
    """Log one line per request: method, path, status, duration and user."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        started = time.monotonic()
        response = self.get_response(request)
        elapsed_ms = (time.monotonic() - started) * 1000
        user = getattr(request, 'user', None)
        username = user.get_username() if user is not None and user.is_authenticated else '-'
        logger.info(
            '%s %s -> %s (%.1f ms) user=%s',
            request.method, request.get_full_path(), response.status_code, elapsed_ms, username,
        )
        return response
