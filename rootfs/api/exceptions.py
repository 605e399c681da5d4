"""
Exceptions raised by the routecheck API and the handler that renders them.
"""
import logging

from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class RoutecheckException(APIException):
    status_code = 400
    default_detail = 'The request could not be processed.'


class ServiceUnavailable(RoutecheckException):
    status_code = 503
    default_detail = 'Service temporarily unavailable, try again later.'


def custom_exception_handler(exc, context):
    # give more context on the error since DRF masks it as Not Found
    if isinstance(exc, Http404):
        return Response(str(exc), status=status.HTTP_404_NOT_FOUND)

    response = exception_handler(exc, context)
    # No response means DRF couldn't handle it
    # Output a generic 500 in a JSON format
    if response is None:
        logger.exception('Uncaught Exception', exc_info=exc)
        return Response({'detail': 'Server Error'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, RoutecheckException):
        logger.exception(exc.__cause__, exc_info=exc)
    return response
