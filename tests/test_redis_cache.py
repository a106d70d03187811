"""Tests for the optional Redis cache wrapper."""

import json
from unittest.mock import AsyncMock

import pytest
import redis.asyncio as redis

from src.core.redis import RedisCache


@pytest.fixture
def client():
    client = AsyncMock()
    client.get = AsyncMock(return_value=None)
    client.setex = AsyncMock()
    client.delete = AsyncMock(return_value=1)
    return client


@pytest.mark.asyncio
async def test_disconnected_cache_is_a_noop():
    cache = RedisCache()

    assert await cache.get('key') is None
    assert await cache.set('key', {'a': 1}) is False
    assert await cache.delete('key') is False


@pytest.mark.asyncio
async def test_set_and_get_json(client):
    cache = RedisCache(client)

    assert await cache.set('programs', {'total': 2}, expire=60) is True
    client.setex.assert_awaited_once_with('programs', 60, json.dumps({'total': 2}, default=str))

    client.get.return_value = json.dumps({'total': 2})
    assert await cache.get('programs') == {'total': 2}


@pytest.mark.asyncio
async def test_redis_errors_degrade_to_miss(client):
    client.get.side_effect = redis.ConnectionError('down')
    client.delete.side_effect = redis.ConnectionError('down')
    cache = RedisCache(client)

    assert await cache.get('programs') is None
    assert await cache.delete('programs') is False
