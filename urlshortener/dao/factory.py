"""Build the configured ShortURL DAO

Functions:
    short_url_dao(backend_config: dict) -> ShortURLBaseDAO
        Construct (or reuse) the DAO selected by a lambda's configuration.

The configuration has exactly one backend key, as returned by load_config():

    {"file": {"path": "testing.json"}}
    {"memory": {}}
    {"redis": {"host": "localhost", "port": 6379, "db": 0, "prefix": "urlshortener:local"}}

DAOs are cached per process and per configuration. A warm Lambda container
therefore keeps its memory store between invocations, and all file DAOs for
one path share one instance.
"""

import json
import logging
import functools

from urlshortener.dao.base import ShortURLBaseDAO
from urlshortener.dao.file import ShortURLFileDAO
from urlshortener.dao.memory import ShortURLMemoryDAO
from urlshortener.dao.redis import ShortURLRedisDAO
from urlshortener.exceptions import BadConfigurationError
from urlshortener.types import LambdaConfiguration


logger = logging.getLogger(__name__)

BACKENDS = ('memory', 'file', 'redis')


def short_url_dao(backend_config: LambdaConfiguration) -> ShortURLBaseDAO:
    """Return the DAO for a lambda's backend configuration

    Args:
        backend_config (dict):
            Lambda configuration. Keys other than the known backends
            (e.g. 'base_url') are ignored.

    Returns:
        ShortURLBaseDAO: memory, file or Redis DAO.

    Raises:
        BadConfigurationError:
            If no known backend (or more than one) is configured, or the
            backend is missing a required option.
        DataStoreError:
            If the DAO cannot reach or create its backing store.
    """
    selected = [name for name in BACKENDS if name in backend_config]
    if len(selected) != 1:
        raise BadConfigurationError(f'Expected exactly one store backend out of {BACKENDS} (given: {sorted(backend_config)}).')

    backend = selected[0]
    options = backend_config[backend] or {}
    return _cached_dao(backend, json.dumps(options, sort_keys=True))


@functools.cache
def _cached_dao(backend: str, options_json: str) -> ShortURLBaseDAO:
    options = json.loads(options_json)
    logger.debug('Creating %s store DAO.', backend)

    if backend == 'memory':
        return ShortURLMemoryDAO()

    if backend == 'file':
        if not options.get('path'):
            raise BadConfigurationError("File store backend requires a 'path' option.")
        return ShortURLFileDAO(options['path'])

    prefix = options.pop('prefix', None)
    redis_config = {f'redis_{k}': v for k, v in options.items()}
    return ShortURLRedisDAO(**redis_config, prefix=prefix)
