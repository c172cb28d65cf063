from enum import StrEnum


# Number of hex characters kept from the URL digest
SHORTCODE_LENGTH = 10

# Version tag written into every File Store snapshot
SNAPSHOT_VERSION = 'v1'

# Public prefix prepended to shortcodes when no base_url is configured
DEFAULT_BASE_URL = 'http://localhost:8080/r'


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        PROJECT_ROOT = 'PROJECT_ROOT'
        AWS_SAM_LOCAL = 'AWS_SAM_LOCAL'
        LOG_LEVEL = 'LOG_LEVEL'

    class Config(StrEnum):
        PATH = 'URLSHORTENER_CONFIG'


class ErrorCode(StrEnum):
    """Error codes returned in HTTP response bodies."""

    INVALID_JSON_BODY = 'INVALID_JSON_BODY'
    MISSING_TARGET_URL = 'MISSING_TARGET_URL'
    MISSING_SHORTCODE = 'MISSING_SHORTCODE'
    SHORT_URL_NOT_FOUND = 'SHORT_URL_NOT_FOUND'
    SHORTCODE_COLLISION = 'SHORTCODE_COLLISION'
    DATA_STORE_ERROR = 'DATA_STORE_ERROR'
    UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'


# Log event names
SHORTEN_SUCCESS = 'SHORTEN_SUCCESS'
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
DELETE_SUCCESS = 'DELETE_SUCCESS'
