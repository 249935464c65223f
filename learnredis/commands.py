import logging
from functools import lru_cache
from typing import Any, TypeVar

import redis.asyncio as redis_async
from pydantic import TypeAdapter, ValidationError
from redis import RedisError

from learnredis import config

log = logging.getLogger(__name__)

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(reply_type: Any) -> TypeAdapter:
    return TypeAdapter(reply_type)


class CommandGroup:
    """Holds one connection and sends exactly one command per call.

    A failed command (connection error, server error reply, or a reply that does
    not fit the expected type) is logged and answered with ``default``. Pass
    ``raise_on_error=True`` to get a ``RuntimeError`` instead; ``None`` falls back
    to ``config.RAISE_ON_ERROR``.

    Note that with the default policy an absent key and a failed command look the
    same to the caller.
    """

    def __init__(self, con: redis_async.Redis, raise_on_error: bool | None = None):
        self.con = con
        self.raiseOnError = config.RAISE_ON_ERROR if raise_on_error is None else bool(raise_on_error)

    async def _query(self, command: str, *args: Any, reply_type: type[T] | Any, default: T) -> T:
        try:
            reply = await self.con.execute_command(command, *args)
            if reply is None:
                # nil reply: key or field does not exist
                return default
            return _adapter(reply_type).validate_python(reply)
        except (RedisError, ValidationError) as e:
            if self.raiseOnError:
                raise RuntimeError(f"Failed to run {command}: {e}")
            log.warning(f"Redis {command} failed, returning {default!r}: {e}")
            return default
