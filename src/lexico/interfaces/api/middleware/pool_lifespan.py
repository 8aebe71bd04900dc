"""Pool lifespan middleware - opens pools on startup, closes on shutdown."""

from typing import Any

from psycopg_pool import AsyncConnectionPool


class PoolLifespanMiddleware:
    """Middleware that opens the document store pools on startup and closes them on shutdown."""

    def __init__(self, pools: list[AsyncConnectionPool]) -> None:
        self._pools = pools

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Open pools when ASGI server starts."""
        for pool in self._pools:
            await pool.open()

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Close pools when ASGI server shuts down."""
        for pool in self._pools:
            await pool.close()
