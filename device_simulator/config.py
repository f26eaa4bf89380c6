"""
Simulator Configuration

Environment-based settings for the device simulator.

Environment variables (a .env file in the working directory is loaded first):
- DEVSIM_CONTENT_ROOT: Directory holding the device web assets (default: ".")
- DEVSIM_DEFAULT_DOCUMENT: Document served for "/" (default: "index.htm")
- DEVSIM_FALLBACK_DOCUMENT: Document served when a file is absent (default: "404.html")
- DEVSIM_HEAP_PATH: Path reporting free memory (default: "/heap")
- DEVSIM_HOST: Bind address (default: "0.0.0.0")
- DEVSIM_PORT: Listening port (default: 8080)
- DEVSIM_SERVE_GZIP: "false" to stop serving "<file>.gz" siblings
- DEVSIM_LOG_LEVEL: Logging level name (default: "INFO")
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class SimulatorSettings:
    """
    Configuration for the simulator.
    
    Attributes:
        content_root: Base directory all asset paths are resolved against
        default_document: File name substituted for the root path
        fallback_document: File served (with status 200) for absent files
        heap_path: Request path answered with the free memory report
        host: Interface to bind
        port: TCP port shared by HTTP and WebSocket traffic
        serve_gzip: Serve "<file>.gz" when "<file>" is absent
        log_level: Logging level name
    """
    content_root: Path = field(default_factory=lambda: Path("."))
    default_document: str = "index.htm"
    fallback_document: str = "404.html"
    heap_path: str = "/heap"
    host: str = "0.0.0.0"
    port: int = 8080
    serve_gzip: bool = True
    log_level: str = "INFO"
    
    def __post_init__(self) -> None:
        self.content_root = Path(self.content_root)
        if not self.default_document:
            raise ValueError("default_document must not be empty")
        if not self.fallback_document:
            raise ValueError("fallback_document must not be empty")
        if not self.heap_path.startswith("/"):
            raise ValueError(f"heap_path must start with '/': {self.heap_path!r}")
        if not 0 < self.port < 65536:
            raise ValueError(f"port out of range: {self.port}")
        self.log_level = self.log_level.upper()


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


def _parse_port(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"DEVSIM_PORT must be an integer, got {value!r}") from None


def settings_from_env(load_env_file: bool = True) -> SimulatorSettings:
    """
    Create SimulatorSettings from environment variables.
    
    Args:
        load_env_file: Load a .env file before reading the environment
        
    Raises:
        ValueError: If a variable holds an invalid value
    """
    if load_env_file:
        load_dotenv(find_dotenv(usecwd=True))
    
    return SimulatorSettings(
        content_root=Path(os.getenv("DEVSIM_CONTENT_ROOT", ".")),
        default_document=os.getenv("DEVSIM_DEFAULT_DOCUMENT", "index.htm"),
        fallback_document=os.getenv("DEVSIM_FALLBACK_DOCUMENT", "404.html"),
        heap_path=os.getenv("DEVSIM_HEAP_PATH", "/heap"),
        host=os.getenv("DEVSIM_HOST", "0.0.0.0"),
        port=_parse_port(os.getenv("DEVSIM_PORT", "8080")),
        serve_gzip=_parse_bool("DEVSIM_SERVE_GZIP", os.getenv("DEVSIM_SERVE_GZIP", "true")),
        log_level=os.getenv("DEVSIM_LOG_LEVEL", "INFO"),
    )


def configure_logging(level: str = "INFO") -> None:
    """Configure process-wide console logging."""
    logging.basicConfig(format=LOG_FORMAT)
    # basicConfig is a no-op once a handler exists, the level still applies
    logging.getLogger().setLevel(level.upper())
