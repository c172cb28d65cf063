"""Unit tests for Redis-based mixins.

Test coverage includes:
    1. Initialization and configuration
       - Ensures correct initialization with or without a Redis client.
    2. Healthcheck behavior
       - Healthcheck pings Redis.
       - Missed pong from Redis raises DataStoreError.
"""

from unittest.mock import patch

import pytest
import redis

from urlshortener.dao.exceptions import DataStoreError
from urlshortener.dao.redis.mixins import RedisClientMixin


# -------------------------------
# 1. Initialization and configuration
# -------------------------------


def test_initialize_without_redis_client(redis_client):
    """Ensure the mixin creates a decoding Redis client when none is provided."""
    with patch('urlshortener.dao.redis.mixins.redis.Redis', return_value=redis_client) as mock_redis:
        mixin = RedisClientMixin(redis_host='redis', redis_port='6379', redis_db='0', redis_username='default', redis_password='password')

    mock_redis.assert_called_once_with(
        host='redis',
        port=6379,
        db=0,
        decode_responses=True,
        username='default',
        password='password',
    )
    assert mixin.redis is redis_client
    redis_client.ping.assert_called_once()


def test_initialize_with_redis_client(redis_client, app_prefix):
    mixin = RedisClientMixin(redis_client=redis_client, prefix=app_prefix)

    assert mixin.redis is redis_client
    assert mixin.keys.prefix == app_prefix


# -------------------------------
# 2. Healthcheck behavior
# -------------------------------


@pytest.mark.parametrize(
    'error',
    [
        redis.exceptions.ConnectionError('no pong'),
        redis.exceptions.TimeoutError('Timeout connecting to server'),
    ],
)
def test_healthcheck_failure_raises_data_store_error(redis_client, error):
    redis_client.ping.side_effect = error

    with pytest.raises(DataStoreError, match="Can't connect to Redis at 203.0.113.1:18000/5."):
        RedisClientMixin(redis_client=redis_client)


def test_healthcheck_without_raising(redis_client):
    mixin = RedisClientMixin(redis_client=redis_client)
    redis_client.ping.side_effect = redis.exceptions.ConnectionError('no pong')

    assert mixin._healthcheck(raise_error=False) is False
