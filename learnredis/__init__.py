"""
learnredis - Redis string and hash commands, one wrapper per command, over a single connection.
"""

from learnredis.connection import connect, disconnect
from learnredis.hashes import Hashes
from learnredis.strings import Strings

__all__ = [
    "connect",
    "disconnect",
    "Strings",
    "Hashes",
]
