"""Helper utilities for AWS lambda functions.

Functions:
    get_short_url(shortcode, base_url) -> str
        Get string representation of short URL for a given shortcode
    path_shortcode(event) -> str | None
        Extract the shortcode path parameter from an API Gateway event
    guarantee_500_response(handler) -> Callable
        Decorator: Turn uncaught handler exceptions into HTTP 500 responses
    response(status_code, body, headers) -> dict
        Build an API Gateway proxy response with a JSON body
    error_response(status_code, reason, message, error_code) -> dict
        Build an API Gateway proxy error response

Example:
    >>> from urlshortener.utils.helpers import get_short_url
    >>> get_short_url('bf705e83e0', 'http://localhost:8080/r')
    'http://localhost:8080/r/bf705e83e0'
"""

import json
import logging
import functools
from typing import Any
from collections.abc import Callable

from urlshortener.constants import ErrorCode
from urlshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from urlshortener.utils.runtime import running_locally


logger = logging.getLogger(__name__)


def get_short_url(shortcode: str, base_url: str) -> str:
    """Get string representation of shortened URL

    Args:
        shortcode (str): shortcode
        base_url (str): public prefix of short URLs, e.g. 'http://localhost:8080/r'

    Returns:
        str: short url string representation
    """
    return f'{base_url.rstrip("/")}/{shortcode}'


def path_shortcode(event: LambdaEvent) -> str | None:
    """Extract the 'shortcode' path parameter from an API Gateway event

    Returns:
        str | None: the shortcode, or None when missing or empty.
    """
    shortcode = (event.get('pathParameters') or {}).get('shortcode')
    return shortcode or None


def response(status_code: int, body: dict[str, Any] | None = None, headers: dict[str, str] | None = None) -> LambdaResponse:
    return {
        'statusCode': status_code,
        'headers': {'Content-Type': 'application/json', **(headers or {})},
        'body': json.dumps(body if body is not None else {}),
    }


def error_response(status_code: int, reason: str, message: str | None = None, error_code: str | None = None) -> LambdaResponse:
    body = {'message': reason if not message else f'{reason} ({message})'}
    if error_code:
        body['error_code'] = error_code
    return response(status_code, body)


def guarantee_500_response(handler: Callable) -> Callable:
    """Decorator: respond with HTTP 500 when a lambda handler raises

    When running locally the original exception is re-raised instead, so
    tracebacks stay visible during development.

    Example:
        >>> @guarantee_500_response
        ... def lambda_handler(event, context):
        ...     raise RuntimeError('boom')
        >>> lambda_handler({}, None)['statusCode']
        500
    """

    @functools.wraps(handler)
    def wrapper(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
        try:
            return handler(event, context)
        except Exception:
            if running_locally():
                raise
            logger.exception('Unhandled exception in lambda handler. Responding with 500.')
            return error_response(500, 'Internal Server Error', error_code=ErrorCode.UNKNOWN_INTERNAL_SERVER_ERROR)

    return wrapper
