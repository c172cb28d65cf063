import logging

from urlshortener.constants import ErrorCode, DELETE_SUCCESS
from urlshortener.dao import short_url_dao
from urlshortener.dao.exceptions import DataStoreError, ShortURLNotFoundError
from urlshortener.exceptions import ConfigurationError
from urlshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from urlshortener.utils import load_config, get_short_url, path_shortcode, guarantee_500_response
from urlshortener.utils.helpers import response, error_response


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to delete short URLs

    HTTP responses:
        200: Short URL deleted
            message: 'deleted'
            shortcode: deleted shortcode
        400: Bad client request
            message: missing shortcode in path parameters
        404: Not found
            message: no short URL exists for the shortcode
        500: Internal server error
            message: server experienced an internal error
    """
    # 0- Get application's config
    try:
        app_config = load_config('delete_url')
    except (FileNotFoundError, ConfigurationError):
        logger.exception('Failed to load config for delete URL function. Responding with 500.')
        return error_response(500, 'Internal Server Error')

    # 1- Extract shortcode from request's path
    shortcode = path_shortcode(event)
    if shortcode is None:
        logger.info('Missing "shortcode" in path. Responding with 400.', extra={'event': ErrorCode.MISSING_SHORTCODE})
        return error_response(400, 'Bad Request', "missing 'shortcode' in path", ErrorCode.MISSING_SHORTCODE)

    # 2- Remove the mapping from database
    try:
        short_url_dao(app_config).remove(shortcode)
    except ShortURLNotFoundError:
        short_url = get_short_url(shortcode, app_config['base_url'])
        logger.info(
            'Short URL record not found in database. Responding with 404.',
            extra={'shortcode': shortcode, 'event': ErrorCode.SHORT_URL_NOT_FOUND},
        )
        return error_response(404, 'Not Found', f"short url {short_url} doesn't exist", ErrorCode.SHORT_URL_NOT_FOUND)
    except (DataStoreError, ConfigurationError):
        logger.exception('Data store unavailable. Responding with 500.', extra={'event': ErrorCode.DATA_STORE_ERROR})
        return error_response(500, 'Internal Server Error', 'data store unavailable', ErrorCode.DATA_STORE_ERROR)

    logger.info('Deleted short URL. Responding with 200.', extra={'shortcode': shortcode, 'event': DELETE_SUCCESS})
    return response(200, {'message': 'deleted', 'shortcode': shortcode})
