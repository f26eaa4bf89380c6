"""Route table ordering, defaults and error containment."""

import asyncio

from fastapi.responses import PlainTextResponse

from device_simulator.routing import RouteTable


def _responder(body: str):
    async def handler(path: str):
        return PlainTextResponse(body)
    return handler


def test_default_handler_when_nothing_matches() -> None:
    table = RouteTable(default=_responder("default"))
    table.add_exact("/heap", _responder("heap"))

    response = asyncio.run(table.dispatch("/index.htm"))

    assert response.body == b"default"


def test_exact_route_matches() -> None:
    table = RouteTable(default=_responder("default"))
    table.add_exact("/heap", _responder("heap"))

    assert asyncio.run(table.dispatch("/heap")).body == b"heap"
    assert asyncio.run(table.dispatch("/heap/more")).body == b"default"


def test_first_registered_route_wins() -> None:
    table = RouteTable(default=_responder("default"))
    table.add("api", lambda path: path.startswith("/api"), _responder("first"))
    table.add("api-status", lambda path: path == "/api/status", _responder("second"))

    assert asyncio.run(table.dispatch("/api/status")).body == b"first"
    assert [route.name for route in table.routes] == ["api", "api-status"]


def test_handler_error_becomes_500() -> None:
    async def broken(path: str):
        raise RuntimeError("boom")

    table = RouteTable(default=_responder("default"))
    table.add_exact("/broken", broken)

    response = asyncio.run(table.dispatch("/broken"))

    assert response.status_code == 500
    # the table keeps working after a failure
    assert asyncio.run(table.dispatch("/fine")).body == b"default"


def test_tables_do_not_share_routes() -> None:
    first = RouteTable(default=_responder("one"))
    second = RouteTable(default=_responder("two"))
    first.add_exact("/heap", _responder("heap"))

    assert second.routes == []
