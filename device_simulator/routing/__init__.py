# Routing
# Explicit first-match-wins dispatch for HTTP GET requests

from .table import Route, RouteTable, RouteHandler, RoutePredicate

__all__ = [
    "Route",
    "RouteTable",
    "RouteHandler",
    "RoutePredicate",
]
