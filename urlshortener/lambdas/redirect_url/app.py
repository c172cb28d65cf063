import logging

from urlshortener.constants import ErrorCode, REDIRECT_SUCCESS
from urlshortener.dao import short_url_dao
from urlshortener.dao.exceptions import DataStoreError, ShortURLNotFoundError
from urlshortener.exceptions import ConfigurationError
from urlshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from urlshortener.utils import load_config, get_short_url, path_shortcode, guarantee_500_response
from urlshortener.utils.helpers import error_response


logger = logging.getLogger(__name__)


def response_307(*, location: str) -> LambdaResponse:
    return {
        'statusCode': 307,
        'headers': {'Location': location},
        'body': '',
    }


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to redirect URLs

    This Lambda handler follows this procedure to redirect URLs:
    - Step 1: Extract shortcode from request path
    - Step 2: Get target URL from database
    - Step 3: Redirect client to target URL

    HTTP responses:
        307: Successful redirect
            headers:
                Location: target URL destination
        400: Bad client request
            message: missing shortcode in path parameters
        404: Not found
            message: no short URL exists for the shortcode
        500: Internal server error
            message: server experienced an internal error

    Example:
        >>> event = {'pathParameters': {'shortcode': 'bf705e83e0'}}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        307
        >>> response['headers']['Location']
        'https://example.com/page'
    """
    # 0- Get application's config
    try:
        app_config = load_config('redirect_url')
    except (FileNotFoundError, ConfigurationError):
        logger.exception('Failed to load config for redirect URL function. Responding with 500.')
        return error_response(500, 'Internal Server Error')

    # 1- Extract shortcode from request's path
    shortcode = path_shortcode(event)
    if shortcode is None:
        logger.info('Missing "shortcode" in path. Responding with 400.', extra={'event': ErrorCode.MISSING_SHORTCODE})
        return error_response(400, 'Bad Request', "missing 'shortcode' in path", ErrorCode.MISSING_SHORTCODE)

    short_url = get_short_url(shortcode, app_config['base_url'])
    logger.debug('Client requested short URL %s.', short_url)

    # 2- Get target URL from database
    try:
        target_url = short_url_dao(app_config).get(shortcode)
    except ShortURLNotFoundError:
        logger.info(
            'Short URL record not found in database. Responding with 404.',
            extra={'shortcode': shortcode, 'event': ErrorCode.SHORT_URL_NOT_FOUND},
        )
        return error_response(404, 'Not Found', f"short url {short_url} doesn't exist", ErrorCode.SHORT_URL_NOT_FOUND)
    except (DataStoreError, ConfigurationError):
        logger.exception('Data store unavailable. Responding with 500.', extra={'event': ErrorCode.DATA_STORE_ERROR})
        return error_response(500, 'Internal Server Error', 'data store unavailable', ErrorCode.DATA_STORE_ERROR)

    # 3- Redirect client to target URL
    logger.info(
        'Redirecting client to target URL. Responding with 307.',
        extra={'shortcode': shortcode, 'event': REDIRECT_SUCCESS},
    )
    return response_307(location=target_url)
