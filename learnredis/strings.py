"""
Redis strings commands are used for managing string values in Redis.
"""

import asyncio
import logging
from typing import Sequence

from learnredis import connection
from learnredis.commands import CommandGroup

log = logging.getLogger(__name__)


class Strings(CommandGroup):
    async def set(self, key: str, value: str) -> int:
        """Sets ``key`` to ``value``. Returns 1 on success, 0 otherwise."""
        ok = await self._query("SET", key, value, reply_type=bool, default=False)
        return 1 if ok else 0

    async def get(self, key: str) -> str:
        """Gets the value of ``key``, or an empty string when it does not exist."""
        return await self._query("GET", key, reply_type=str, default="")

    async def delete(self, key: str) -> int:
        """Deletes ``key``. Returns the number of keys removed."""
        return await self._query("DEL", key, reply_type=int, default=0)

    async def get_range(self, key: str, start: int, end: int) -> str:
        """
        Gets the substring of the value stored at ``key``, determined by the offsets
        ``start`` and ``end`` (both inclusive). Negative offsets count from the end of
        the string, so ``get_range(key, 0, -1)`` returns the whole value.
        """
        return await self._query("GETRANGE", key, start, end, reply_type=str, default="")

    async def get_set(self, key: str, value: str) -> str:
        """Sets ``key`` to ``value`` and returns its old value."""
        return await self._query("GETSET", key, value, reply_type=str, default="")

    async def getbit(self, key: str, offset: int) -> int:
        """Returns the bit at ``offset`` in the value stored at ``key``."""
        if offset < 0:
            raise ValueError("Bit offset must be non-negative")
        return await self._query("GETBIT", key, offset, reply_type=int, default=0)

    async def setbit(self, key: str, offset: int, value: int) -> int:
        """Sets or clears the bit at ``offset`` and returns the bit previously stored there."""
        if offset < 0:
            raise ValueError("Bit offset must be non-negative")
        if value not in (0, 1):
            raise ValueError("Bit value must be 0 or 1")
        return await self._query("SETBIT", key, offset, int(value), reply_type=int, default=0)

    async def mget(self, keys: Sequence[str]) -> list[str]:
        """Gets the values of all ``keys``; missing keys come back as empty strings."""
        if isinstance(keys, (str, bytes)):
            raise ValueError("MGET needs a sequence of keys, not a single string")
        if not keys:
            raise ValueError("MGET needs at least one key")
        values = await self._query("MGET", *keys, reply_type=list[str | None], default=[None])
        return [v if v is not None else "" for v in values]


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    async def main():
        con = await connection.connect()
        redis_strings = Strings(con)
        await redis_strings.set("excellent-key", "my-value")
        log.info(f"GET excellent-key -> {await redis_strings.get('excellent-key')!r}")
        await redis_strings.delete("excellent-key")
        log.info(f"GET excellent-key after DEL -> {await redis_strings.get('excellent-key')!r}")
        await connection.disconnect(con)

    asyncio.run(main())
