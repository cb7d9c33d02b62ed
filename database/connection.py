import asyncpg
from typing import Optional


class DatabasePool:
    """Manages the asyncpg connection pool lifecycle.

    One instance is created per application in the FastAPI lifespan and
    handed to the repositories explicitly.
    """

    def __init__(self):
        self._pool: Optional[asyncpg.Pool] = None

    async def initialize(
        self,
        dsn: str,
        *,
        min_size: int = 1,
        max_size: int = 5,
        timeout: float = 5.0,
    ) -> None:
        """Create the connection pool. Call once at app startup."""
        if self._pool is not None:
            return
        self._pool = await asyncpg.create_pool(
            dsn=dsn,
            min_size=min_size,
            max_size=max_size,
            timeout=timeout,
        )

    async def close(self) -> None:
        """Close all connections. Call at app shutdown."""
        if self._pool:
            await self._pool.close()
            self._pool = None

    @property
    def pool(self) -> asyncpg.Pool:
        """Get the pool, raising if not initialized."""
        if self._pool is None:
            raise RuntimeError(
                "Database pool not initialized. Call await pool.initialize(dsn) first."
            )
        return self._pool