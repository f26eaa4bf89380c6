"""
Route Table

Ordered list of (predicate, handler) pairs for GET requests.
Routes are evaluated in registration order, the first match wins, and a
default handler takes everything else (normally the asset server).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable

from fastapi.responses import PlainTextResponse, Response

logger = logging.getLogger(__name__)

RoutePredicate = Callable[[str], bool]
RouteHandler = Callable[[str], Awaitable[Response]]


@dataclass(frozen=True)
class Route:
    """A named predicate/handler pair."""
    name: str
    predicate: RoutePredicate
    handler: RouteHandler


class RouteTable:
    """
    Explicit GET dispatch table.
    
    Each table instance owns its routes; there is no global registry.
    """
    
    def __init__(self, default: RouteHandler):
        """
        Initialize the table.
        
        Args:
            default: Handler used when no route matches
        """
        self._routes: list[Route] = []
        self._default = default
    
    @property
    def routes(self) -> list[Route]:
        return list(self._routes)
    
    def add(self, name: str, predicate: RoutePredicate, handler: RouteHandler) -> None:
        """Append a route; earlier routes take precedence."""
        self._routes.append(Route(name, predicate, handler))
    
    def add_exact(self, path: str, handler: RouteHandler, name: str | None = None) -> None:
        """Append a route matching one path exactly."""
        self.add(name or path, lambda candidate: candidate == path, handler)
    
    def match(self, path: str) -> RouteHandler:
        for route in self._routes:
            if route.predicate(path):
                return route.handler
        return self._default
    
    async def dispatch(self, path: str) -> Response:
        """
        Run the handler for a path.
        
        Unexpected handler errors are logged and answered with a 500
        scoped to this request.
        """
        logger.info(path)
        handler = self.match(path)
        try:
            return await handler(path)
        except Exception as e:
            logger.exception(f"Unhandled error dispatching {path}: {e}")
            return PlainTextResponse("Internal Server Error", status_code=500)
