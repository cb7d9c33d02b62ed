"""Shared connection handling for the asyncpg repositories."""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator

import asyncpg

from database.exceptions import StoreUnavailableError

# Failures that mean "the store is not reachable", as opposed to a bad query.
CONNECTION_ERRORS = (
    asyncpg.PostgresConnectionError,
    asyncpg.InterfaceError,
    asyncpg.CannotConnectNowError,
    OSError,
    asyncio.TimeoutError,
)


class BaseRepositoryDB:
    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    @asynccontextmanager
    async def _connection(self) -> AsyncIterator[asyncpg.Connection]:
        """Acquire a pooled connection, translating connectivity failures."""
        try:
            async with self._pool.acquire() as conn:
                yield conn
        except CONNECTION_ERRORS as e:
            raise StoreUnavailableError(f"{type(e).__name__}: {e}") from e
