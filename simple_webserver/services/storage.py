"""
Storage backends for the /ping health probe
"""
import logging
from abc import ABC, abstractmethod
from typing import Optional

import redis.asyncio as redis
from redis.asyncio.retry import Retry
from redis.backoff import NoBackoff
from redis.exceptions import RedisError

from ..config import split_host_port

logger = logging.getLogger(__name__)

DEFAULT_REDIS_HOST = "localhost"
DEFAULT_REDIS_PORT = 6379
URL_SCHEMES = ("redis://", "rediss://", "unix://")


class StorageError(Exception):
    """Backend unreachable, timed out or rejected the probe"""


class Storage(ABC):
    """Liveness probe against a remote key-value backend"""

    @abstractmethod
    async def ping(self) -> str:
        """Return a short liveness token, or raise StorageError."""

    async def close(self):
        pass


class RedisStorage(Storage):
    """
    Storage backed by Redis.

    The underlying redis.asyncio client owns a connection pool, so concurrent
    ping() calls from different requests each check out their own connection.
    Connections are opened lazily on first use and failed commands are not
    retried.
    """

    def __init__(self, address: str, timeout: Optional[float] = 5.0):
        self.address = address
        self.timeout = timeout

        if address.startswith(URL_SCHEMES):
            self._client = redis.from_url(
                address,
                socket_connect_timeout=timeout,
                socket_timeout=timeout,
                retry=Retry(NoBackoff(), 0),
            )
        else:
            host, port = split_host_port(address, DEFAULT_REDIS_HOST, DEFAULT_REDIS_PORT)
            self._client = redis.Redis(
                host=host,
                port=port,
                socket_connect_timeout=timeout,
                socket_timeout=timeout,
                retry=Retry(NoBackoff(), 0),
            )

        logger.info(f"RedisStorage initialized for {address}")

    async def ping(self) -> str:
        try:
            ok = await self._client.ping()
        except (RedisError, OSError) as e:
            raise StorageError(str(e)) from e

        if not ok:
            raise StorageError(f"unexpected PING reply from {self.address}")
        return "PONG"

    async def close(self):
        try:
            await self._client.aclose()
            logger.info("Redis connection closed")
        except Exception as e:
            logger.warning(f"Error closing Redis: {e}")
