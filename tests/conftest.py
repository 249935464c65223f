import os

import pytest
import pytest_asyncio
from redis.exceptions import ResponseError

from learnredis import connection

LIVE_REDIS_URL = os.getenv("LEARN_REDIS_URL", "redis://127.0.0.1:6379/15")
TEST_KEY_PREFIX = "learnredis:test:"

WRONGTYPE = "WRONGTYPE Operation against a key holding the wrong kind of value"


class FakeConnection:
    """In-memory stand-in for a single-connection client, answering execute_command like redis-py does."""

    def __init__(self):
        self.strings: dict[str, bytearray] = {}
        self.hashes: dict[str, dict[str, str]] = {}
        self.sent: list[tuple] = []
        self.fail_with: Exception | None = None
        self.reply_override = None

    async def execute_command(self, command, *args):
        self.sent.append((command, *args))
        if self.fail_with is not None:
            raise self.fail_with
        if self.reply_override is not None:
            return self.reply_override
        return getattr(self, f"_{command.lower()}")(*args)

    def _string(self, key):
        if key in self.hashes:
            raise ResponseError(WRONGTYPE)
        value = self.strings.get(key)
        return None if value is None else value.decode()

    def _set(self, key, value):
        self.hashes.pop(key, None)
        self.strings[key] = bytearray(str(value).encode())
        return True

    def _get(self, key):
        return self._string(key)

    def _del(self, *keys):
        removed = 0
        for key in keys:
            if self.strings.pop(key, None) is not None or self.hashes.pop(key, None) is not None:
                removed += 1
        return removed

    def _getrange(self, key, start, end):
        value = self._string(key) or ""
        size = len(value)
        if start < 0:
            start = max(size + start, 0)
        if end < 0:
            end = size + end
        end = min(end, size - 1)
        if start > end:
            return ""
        return value[start : end + 1]

    def _getset(self, key, value):
        old = self._string(key)
        self._set(key, value)
        return old

    def _getbit(self, key, offset):
        if key in self.hashes:
            raise ResponseError(WRONGTYPE)
        data = self.strings.get(key, bytearray())
        byte, bit = divmod(offset, 8)
        if byte >= len(data):
            return 0
        return (data[byte] >> (7 - bit)) & 1

    def _setbit(self, key, offset, value):
        previous = self._getbit(key, offset)
        data = self.strings.setdefault(key, bytearray())
        byte, bit = divmod(offset, 8)
        if byte >= len(data):
            data.extend(b"\x00" * (byte + 1 - len(data)))
        if value:
            data[byte] |= 1 << (7 - bit)
        else:
            data[byte] &= ~(1 << (7 - bit)) & 0xFF
        return previous

    def _mget(self, *keys):
        return [self.strings[k].decode() if k in self.strings else None for k in keys]

    def _hset(self, key, *pairs):
        if key in self.strings:
            raise ResponseError(WRONGTYPE)
        fields = self.hashes.setdefault(key, {})
        added = 0
        for field, value in zip(pairs[::2], pairs[1::2]):
            if field not in fields:
                added += 1
            fields[field] = str(value)
        return added

    def _hget(self, key, field):
        if key in self.strings:
            raise ResponseError(WRONGTYPE)
        return self.hashes.get(key, {}).get(field)


@pytest.fixture
def fake_conn():
    return FakeConnection()


@pytest_asyncio.fixture
async def live_conn():
    try:
        con = await connection.connect(LIVE_REDIS_URL)
    except RuntimeError as e:
        pytest.skip(f"No Redis server at {LIVE_REDIS_URL}: {e}")
    keys = [k async for k in con.scan_iter(match=f"{TEST_KEY_PREFIX}*")]
    for key in keys:
        await con.delete(key)
    yield con
    keys = [k async for k in con.scan_iter(match=f"{TEST_KEY_PREFIX}*")]
    for key in keys:
        await con.delete(key)
    await connection.disconnect(con)
