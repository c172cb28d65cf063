"""In-process DAO implementation for managing shortened URLs

Mappings live in a plain dictionary for the lifetime of the process and are
lost on restart. Useful for local development and tests.

Classes:
    ShortURLMemoryDAO:
        DAO storing shortcode to URL mappings in process memory.

Example:
    >>> from urlshortener.dao.memory import ShortURLMemoryDAO
    >>> dao = ShortURLMemoryDAO()
    >>> dao.add('a9f2b1c044', 'https://example.com/page')
    <ShortURLMemoryDAO>
    >>> dao.get('a9f2b1c044')
    'https://example.com/page'
"""

import logging
import threading

from beartype import beartype

from urlshortener.dao.base import ShortURLBaseDAO
from urlshortener.dao.exceptions import ShortURLAlreadyExistsError, ShortURLNotFoundError


logger = logging.getLogger(__name__)


class ShortURLMemoryDAO(ShortURLBaseDAO):
    """Memory-based Data Access Object (DAO) for short URL mappings

    Attributes:
        items (dict[str, str]):
            Shortcode to target URL mapping. Empty on construction.

    NOTE:
        Presence is decided by key membership, never by the stored value,
        so an empty target URL is a valid mapping.
    """

    def __init__(self):
        self.items: dict[str, str] = {}
        self._lock = threading.Lock()

    @beartype
    def add(self, shortcode: str, target: str, **kwargs) -> 'ShortURLMemoryDAO':
        with self._lock:
            if shortcode in self.items:
                raise ShortURLAlreadyExistsError(f"Short URL with code '{shortcode}' already exists.")
            self.items[shortcode] = target

        logger.debug('Added short URL mapping to memory store.', extra={'shortcode': shortcode, 'items': len(self.items)})
        return self

    @beartype
    def remove(self, shortcode: str, **kwargs) -> 'ShortURLMemoryDAO':
        with self._lock:
            if shortcode not in self.items:
                raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")
            del self.items[shortcode]

        logger.debug('Removed short URL mapping from memory store.', extra={'shortcode': shortcode, 'items': len(self.items)})
        return self

    @beartype
    def get(self, shortcode: str, **kwargs) -> str:
        with self._lock:
            try:
                return self.items[shortcode]
            except KeyError:
                raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.") from None
