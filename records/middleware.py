import logging

from django.core.exceptions import PermissionDenied, SuspiciousOperation
from django.http import Http404, JsonResponse

from records.exceptions import INTERNAL_ERROR

logger = logging.getLogger(__name__)


class JsonErrorMiddleware:
    """Return the API's JSON 500 body for exceptions raised outside DRF views."""
    PASSTHROUGH = (Http404, PermissionDenied, SuspiciousOperation)

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        if isinstance(exception, self.PASSTHROUGH):
            return None
        logger.error('Unhandled error on %s %s', request.method, request.path, exc_info=exception)
        return JsonResponse(INTERNAL_ERROR, status=500)
