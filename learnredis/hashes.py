"""
Redis Hashes are maps between string fields and string values, which makes them
a good fit for representing objects.
"""

from typing import Mapping, Sequence

from learnredis.commands import CommandGroup


def _flatten(values: Sequence[str] | Mapping[str, str]) -> list[str]:
    if isinstance(values, Mapping):
        flat = [item for pair in values.items() for item in pair]
    elif isinstance(values, (str, bytes)):
        raise ValueError("HSET needs field/value pairs, not a single string")
    else:
        flat = list(values)
    if not flat or len(flat) % 2:
        raise ValueError("HSET needs one or more field/value pairs")
    return flat


class Hashes(CommandGroup):
    async def hset(self, key: str, values: Sequence[str] | Mapping[str, str]) -> int:
        """
        Sets fields in the hash stored at ``key``. ``values`` is either a flat
        ``[field, value, field, value, ...]`` sequence or a ``{field: value}`` mapping.
        A missing key is created; existing fields are overwritten.

        Returns the number of fields that were newly added.
        """
        return await self._query("HSET", key, *_flatten(values), reply_type=int, default=0)

    async def hget(self, key: str, field: str) -> str:
        return await self._query("HGET", key, field, reply_type=str, default="")
