from urlshortener.dao.base import ShortURLBaseDAO
from urlshortener.dao.file import ShortURLFileDAO
from urlshortener.dao.memory import ShortURLMemoryDAO
from urlshortener.dao.redis import ShortURLRedisDAO
from urlshortener.dao.factory import short_url_dao


__all__ = [
    'ShortURLBaseDAO',
    'ShortURLFileDAO',
    'ShortURLMemoryDAO',
    'ShortURLRedisDAO',
    'short_url_dao',
]
