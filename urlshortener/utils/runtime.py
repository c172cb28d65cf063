"""Runtime utilities

Functions:
    running_locally() -> bool:
        True if lambda is running locally (APP_ENV=local or SAM), False otherwise.

Example:
    >>> from urlshortener.utils.runtime import running_locally
    >>> os.environ['APP_ENV'] = 'local'
    >>> running_locally()
    True
"""

import os

from urlshortener.constants import ENV


def running_locally() -> bool:
    """Check if the lambda is running locally via sam local invoke or APP_ENV=local"""
    env = os.getenv(ENV.App.APP_ENV, '').lower()
    return env == 'local' or os.getenv(ENV.App.AWS_SAM_LOCAL) == 'true'
