"""Shared fixtures: a throwaway content root and a client bound to it."""

import gzip
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from device_simulator.config import SimulatorSettings
from device_simulator.transport import create_app

INDEX_BODY = b"<html><body>Device home</body></html>"
FALLBACK_BODY = b"<html><body>Nothing here</body></html>"
SCRIPT_BODY = b"console.log('terminal ready');\n" * 20

# 3.2 GB once scaled
FIXED_FREE_MEMORY = 3 * 1024**3 + 200 * 1024**2


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    root = tmp_path / "data"
    root.mkdir()
    (root / "index.htm").write_bytes(INDEX_BODY)
    (root / "404.html").write_bytes(FALLBACK_BODY)
    (root / "css").mkdir()
    (root / "css" / "site.css").write_bytes(b"body { margin: 0; }")
    (root / "config.json").write_bytes(b'{"ssid": "device"}')
    (root / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n")
    (root / "firmware.weird").write_bytes(b"\x00\x01\x02")
    (root / "js").mkdir()
    (root / "js" / "terminal.js.gz").write_bytes(gzip.compress(SCRIPT_BODY))
    (root / "sub").mkdir()
    return root


@pytest.fixture
def settings(content_root: Path) -> SimulatorSettings:
    return SimulatorSettings(content_root=content_root)


@pytest.fixture
def client(settings: SimulatorSettings):
    app = create_app(settings, memory_probe=lambda: FIXED_FREE_MEMORY)
    with TestClient(app) as test_client:
        yield test_client
