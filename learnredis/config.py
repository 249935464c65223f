import os


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


REDIS_URL = os.getenv("LEARN_REDIS_URL", "redis://127.0.0.1:6379/0")
REDIS_SOCKET_TIMEOUT = float(os.getenv("LEARN_REDIS_SOCKET_TIMEOUT", "5.0"))
REDIS_ENCODING = os.getenv("LEARN_REDIS_ENCODING", "utf-8")

# Command wrappers return a default on failure unless this is set
RAISE_ON_ERROR = _env_flag("LEARN_REDIS_RAISE_ON_ERROR")
