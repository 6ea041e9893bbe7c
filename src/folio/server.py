"""HTTP API over the collection services.

Routes:
    GET  /api/{projects|team|activities}          → full array
    POST /api/{projects|team|activities}          → replace whole array
    POST /api/activities  (single object)         → append one activity
    GET  /api/{projects|team|activities}/next-id  → id for a new record
    GET  /api/stats                               → project and visitor counts
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from aiohttp import web

from folio.errors import PersistenceError, ValidationError

if TYPE_CHECKING:
    from folio.core import Folio

logger = logging.getLogger(__name__)

_COLLECTIONS = "projects|team|activities"


class ApiServer:
    """aiohttp application serving a Folio instance."""

    def __init__(self, folio: Folio) -> None:
        self._folio = folio
        self._config = folio.config.server
        self._runner: web.AppRunner | None = None

    def build_app(self) -> web.Application:
        app = web.Application(middlewares=[self._cors_middleware()])
        app.router.add_get("/api/stats", self._handle_stats)
        app.router.add_get(f"/api/{{collection:{_COLLECTIONS}}}", self._handle_list)
        app.router.add_post(f"/api/{{collection:{_COLLECTIONS}}}", self._handle_replace)
        app.router.add_route("OPTIONS", f"/api/{{collection:{_COLLECTIONS}}}", self._handle_options)
        app.router.add_get(f"/api/{{collection:{_COLLECTIONS}}}/next-id", self._handle_next_id)
        return app

    async def start(self) -> None:
        self._runner = web.AppRunner(self.build_app())
        await self._runner.setup()
        site = web.TCPSite(self._runner, self._config.host, self._config.port)
        await site.start()
        logger.info("API listening on %s:%d", self._config.host, self._config.port)

    async def stop(self) -> None:
        if self._runner:
            await self._runner.cleanup()
            self._runner = None
            logger.info("API stopped")

    # ── Middleware ───────────────────────────────────────────

    def _cors_middleware(self):
        origin = self._config.cors_origin

        def allow(response: web.StreamResponse) -> None:
            response.headers["Access-Control-Allow-Origin"] = origin
            response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
            response.headers["Access-Control-Allow-Headers"] = "Content-Type"

        @web.middleware
        async def cors(request: web.Request, handler):
            try:
                response = await handler(request)
            except web.HTTPException as ex:
                # 404 and 405 come from the router as exceptions
                allow(ex)
                raise
            allow(response)
            return response

        return cors

    # ── Handlers ─────────────────────────────────────────────

    async def _handle_options(self, request: web.Request) -> web.Response:
        return web.Response(status=200)

    async def _handle_list(self, request: web.Request) -> web.Response:
        service = self._folio.service(request.match_info["collection"])
        return web.json_response(service.list())

    async def _handle_next_id(self, request: web.Request) -> web.Response:
        service = self._folio.service(request.match_info["collection"])
        return web.json_response({"id": service.next_id()})

    async def _handle_replace(self, request: web.Request) -> web.Response:
        name = request.match_info["collection"]
        service = self._folio.service(name)

        try:
            body = await request.json()
        except ValueError:
            return web.json_response({"error": "Request body is not valid JSON"}, status=400)

        try:
            if name == "activities" and isinstance(body, dict):
                return web.json_response(service.record(body), status=201)
            service.replace(body)
        except ValidationError as e:
            return web.json_response({"error": str(e)}, status=400)
        except PersistenceError as e:
            logger.error("POST /api/%s failed: %s", name, e)
            return web.json_response({"error": str(e)}, status=500)
        except Exception:
            logger.exception("Error in POST /api/%s", name)
            return web.json_response({"error": "Internal server error"}, status=500)

        return web.json_response(
            {
                "success": True,
                "message": f"{name.capitalize()} updated successfully",
                "count": len(body),
            }
        )

    async def _handle_stats(self, request: web.Request) -> web.Response:
        forwarded = request.headers.get("X-Forwarded-For", "")
        address = forwarded.split(",")[0].strip() or request.remote or "unknown"
        return web.json_response(self._folio.stats.snapshot(address))
