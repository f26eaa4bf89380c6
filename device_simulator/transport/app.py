"""
Device Simulator Application

FastAPI application serving the device web assets over HTTP and the echo
channel over WebSocket, both on one listening socket.

HTTP (GET only):
- GET /      -> default document (index.htm)
- GET /heap  -> free memory as plain text, e.g. "3.2 GB"
- GET /<any> -> file from the content root; missing files get the
                fallback document with status 200, other read errors a 500

WebSocket: upgrades are accepted on any path.

Run with:
    uvicorn device_simulator.transport.app:create_app --factory --port 8080
or:
    python -m device_simulator --root ./data
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, WebSocket
from fastapi.responses import PlainTextResponse, Response

from device_simulator import __version__
from device_simulator.assets import AssetServer, FileSystemAssetSource
from device_simulator.channel import EchoChannelHandler
from device_simulator.config import (
    SimulatorSettings,
    configure_logging,
    settings_from_env,
)
from device_simulator.heap import MemoryProbe, free_memory, heap_report
from device_simulator.routing import RouteTable

logger = logging.getLogger(__name__)


def create_app(
    settings: SimulatorSettings | None = None,
    memory_probe: MemoryProbe = free_memory,
) -> FastAPI:
    """
    Build the simulator application.
    
    Args:
        settings: Simulator configuration (default: from environment)
        memory_probe: Source of the free memory figure for the heap route
    """
    if settings is None:
        settings = settings_from_env()
    configure_logging(settings.log_level)
    
    source = FileSystemAssetSource(settings.content_root)
    asset_server = AssetServer(
        source,
        default_document=settings.default_document,
        fallback_document=settings.fallback_document,
        serve_gzip=settings.serve_gzip,
    )
    channel_handler = EchoChannelHandler()
    
    async def serve_asset(path: str) -> Response:
        result = await asset_server.serve(path)
        # Content-Type is sent verbatim, without a charset parameter
        return Response(
            content=result.body,
            status_code=result.status_code,
            headers={**result.headers, "Content-Type": result.media_type},
        )
    
    async def serve_heap(path: str) -> Response:
        return PlainTextResponse(heap_report(memory_probe))
    
    routes = RouteTable(default=serve_asset)
    routes.add_exact(settings.heap_path, serve_heap, name="heap")
    
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Serving assets from {source.root}")
        logger.info(f"Server listening on: http://{settings.host}:{settings.port}")
        yield
        logger.info("Device simulator stopped")
    
    # Docs routes are disabled so they cannot shadow asset paths
    app = FastAPI(
        title="Device Simulator",
        description="Embedded device web server simulator",
        version=__version__,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.asset_server = asset_server
    app.state.routes = routes
    
    @app.websocket("/{path:path}")
    async def channel_endpoint(websocket: WebSocket, path: str):
        """Echo channel; any path is accepted."""
        await channel_handler.handle_connection(websocket)
    
    @app.get("/{path:path}")
    async def http_endpoint(path: str) -> Response:
        return await routes.dispatch("/" + path)
    
    return app

