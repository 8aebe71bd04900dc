"""Health check endpoints."""

from datetime import UTC, datetime

import falcon.asgi


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, environment: str = "development", port: int | None = None) -> None:
        self._environment = environment
        self._port = port

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {
            "status": "ok",
            "environment": self._environment,
            "port": self._port,
            "time": datetime.now(UTC).isoformat(),
        }
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - readiness."""
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200
