import json
import base64
import logging
from typing import Any

from urlshortener.constants import ErrorCode, SHORTEN_SUCCESS
from urlshortener.dao import short_url_dao
from urlshortener.dao.base import ShortURLBaseDAO
from urlshortener.dao.exceptions import DataStoreError, ShortURLAlreadyExistsError, ShortURLNotFoundError
from urlshortener.exceptions import ConfigurationError, ShortcodeCollisionError
from urlshortener.models import ShortURLModel
from urlshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from urlshortener.utils import generate_shortcode, load_config, get_short_url, guarantee_500_response
from urlshortener.utils.helpers import response, error_response


logger = logging.getLogger(__name__)

STORE_ATTEMPTS = 2


def request_body(event: LambdaEvent) -> Any:
    """Decode the JSON request body of an API Gateway event

    Raises:
        ValueError: If the body is not valid (base64-encoded) JSON.
    """
    body = event.get('body') or '{}'
    if event.get('isBase64Encoded'):
        body = base64.b64decode(body).decode('utf-8')
    return json.loads(body)


def store_short_url(dao: ShortURLBaseDAO, short_url: ShortURLModel) -> bool:
    """Persist a short URL mapping, tolerating duplicate submissions

    A shortcode that is already stored for the same target URL means the URL
    was shortened before. A shortcode stored for a different target URL is a
    hash collision. A shortcode deleted between the failed add and the lookup
    is added again, at most STORE_ATTEMPTS times in total.

    Returns:
        bool: True if a new mapping was stored, False if it already existed.

    Raises:
        ShortcodeCollisionError:
            If the shortcode already maps to a different target URL.
        DataStoreError:
            If the data store cannot be read or written, or the shortcode kept
            being deleted concurrently.
    """
    for _ in range(STORE_ATTEMPTS):
        try:
            dao.add(short_url.shortcode, short_url.target)
        except ShortURLAlreadyExistsError:
            pass
        else:
            return True

        try:
            existing_target = dao.get(short_url.shortcode)
        except ShortURLNotFoundError:
            logger.info('Shortcode deleted while storing. Retrying.', extra={'shortcode': short_url.shortcode})
            continue

        if existing_target != short_url.target:
            raise ShortcodeCollisionError(short_url.shortcode, existing_target, short_url.target)
        return False

    raise DataStoreError(f"Shortcode '{short_url.shortcode}' changed concurrently in every storage attempt.")


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to shorten URLs

    This Lambda handler follows this procedure to shorten URLs:
    - Step 1: Extract original URL from request body
    - Step 2: Generate shortcode from the URL's content hash
    - Step 3: Store shortcode and target URL mapping in database (via DAO)
    - Step 4: Respond to user with 201 created

    HTTP responses:
        201: Successful URL shortening (or the URL was already shortened)
            shortened_url: newly generated short url
            long_url: original url (provided in request)
            shortcode: newly generated shortcode
        400: Bad client request
            message: indicate cause of bad request (invalid JSON or missing url)
        409: Conflict
            message: a different URL already owns the generated shortcode
        500: Internal server error
            message: indicate the server experienced an internal error

    Example:
        >>> event = {'body': '{"url": "https://example.com/page"}'}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        201
        >>> json.loads(response['body'])['shortened_url']
        'http://localhost:8080/r/bf705e83e0'
    """
    # 0- Get application's config
    try:
        app_config = load_config('shorten_url')
    except (FileNotFoundError, ConfigurationError):
        logger.exception('Failed to load config for shorten URL function. Responding with 500.')
        return error_response(500, 'Internal Server Error')

    # 1- Extract original URL from request body
    try:
        body = request_body(event)
    except ValueError:
        logger.info('Invalid JSON body. Responding with 400.', extra={'event': ErrorCode.INVALID_JSON_BODY})
        return error_response(400, 'Bad Request', 'invalid JSON body', ErrorCode.INVALID_JSON_BODY)

    target_url = body.get('url') if isinstance(body, dict) else None
    if not isinstance(target_url, str) or not target_url:
        logger.info('Missing "url" in JSON body. Responding with 400.', extra={'event': ErrorCode.MISSING_TARGET_URL})
        return error_response(400, 'Bad Request', "missing 'url' in JSON body", ErrorCode.MISSING_TARGET_URL)

    # 2- Generate shortcode for the new link
    short_url = ShortURLModel(target=target_url, shortcode=generate_shortcode(target_url))

    # 3- Store shortcode and target URL mapping in database (via DAO)
    try:
        created = store_short_url(short_url_dao(app_config), short_url)
    except ShortcodeCollisionError as e:
        logger.warning(
            'Shortcode collision between different URLs. Responding with 409.',
            extra={'shortcode': e.shortcode, 'event': ErrorCode.SHORTCODE_COLLISION},
        )
        return error_response(409, 'Conflict', f"shortcode '{e.shortcode}' is taken by a different URL", ErrorCode.SHORTCODE_COLLISION)
    except (DataStoreError, ConfigurationError):
        logger.exception('Data store unavailable. Responding with 500.', extra={'event': ErrorCode.DATA_STORE_ERROR})
        return error_response(500, 'Internal Server Error', 'data store unavailable', ErrorCode.DATA_STORE_ERROR)

    # 4- Return successful response to user
    short_url_string = get_short_url(short_url.shortcode, app_config['base_url'])
    logger.info(
        'Shortened URL. Responding with 201.',
        extra={'shortcode': short_url.shortcode, 'created': created, 'event': SHORTEN_SUCCESS},
    )
    return response(
        201,
        {
            'shortened_url': short_url_string,
            'long_url': short_url.target,
            'shortcode': short_url.shortcode,
        },
    )
