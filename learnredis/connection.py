"""
Establish a connection to a Redis server.

Every handle returned here is bound to a single connection: no pool is shared
between callers and nothing reconnects behind your back.

Usage::

    con = await connect("redis://127.0.0.1/")
    strings = Strings(con)
    await strings.set("excellent-key", "my-value")
    await disconnect(con)
"""

import logging

import redis.asyncio as redis_async
from redis import RedisError

from learnredis import config

log = logging.getLogger(__name__)


async def connect(uri: str | None = None) -> redis_async.Redis:
    uri = uri or config.REDIS_URL
    con = redis_async.Redis.from_url(
        uri,
        single_connection_client=True,
        decode_responses=True,
        encoding=config.REDIS_ENCODING,
        socket_timeout=config.REDIS_SOCKET_TIMEOUT,
        socket_connect_timeout=config.REDIS_SOCKET_TIMEOUT,
    )
    try:
        await con.ping()
    except RedisError as e:
        await con.aclose()
        raise RuntimeError(f"Failed to connect to {uri}: {e}")
    log.info(f"Connected to Redis at {uri}")
    return con


async def disconnect(con: redis_async.Redis) -> None:
    await con.aclose()
    log.info("Closed Redis connection")
