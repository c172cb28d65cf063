"""Data Access Object (DAO) implementation for managing shortened URLs in Redis

Each mapping is a single string key `<prefix>:links:<shortcode>:url` holding
the target URL. Uniqueness relies on SET NX, so concurrent adds of the same
shortcode cannot both succeed.

Classes:
    ShortURLRedisDAO:
        DAO for storing and retrieving shortcode mappings in a Redis datastore.

Example:
    >>> from urlshortener.dao.redis import ShortURLRedisDAO

    >>> dao = ShortURLRedisDAO(prefix="urlshortener:dev")
    >>> dao.add("abc1234567", "https://example.com/page")
    <ShortURLRedisDAO>
    >>> dao.get("abc1234567")
    'https://example.com/page'
"""

from beartype import beartype

from urlshortener.dao.base import ShortURLBaseDAO
from urlshortener.dao.redis.mixins import RedisClientMixin
from urlshortener.dao.redis.helpers import handle_redis_connection_error
from urlshortener.dao.exceptions import ShortURLAlreadyExistsError, ShortURLNotFoundError


class ShortURLRedisDAO(RedisClientMixin, ShortURLBaseDAO):
    """Redis-based Data Access Object (DAO) for short URL mappings

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.
    """

    @handle_redis_connection_error
    @beartype
    def add(self, shortcode: str, target: str, **kwargs) -> 'ShortURLRedisDAO':
        # SET NX replies None when the key already exists
        if not self.redis.set(self.keys.link_url_key(shortcode), target, nx=True):
            raise ShortURLAlreadyExistsError(f"Short URL with code '{shortcode}' already exists.")
        return self

    @handle_redis_connection_error
    @beartype
    def remove(self, shortcode: str, **kwargs) -> 'ShortURLRedisDAO':
        if self.redis.delete(self.keys.link_url_key(shortcode)) == 0:
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")
        return self

    @handle_redis_connection_error
    @beartype
    def get(self, shortcode: str, **kwargs) -> str:
        target = self.redis.get(self.keys.link_url_key(shortcode))
        if target is None:
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")
        return target
