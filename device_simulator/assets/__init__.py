# Asset Layer
# Resolves HTTP request paths to static device web assets
#
# This module provides:
# - Port interface (AssetSource) and the asset error taxonomy
# - Filesystem and in-memory sources
# - Media type lookup
# - AssetServer producing transport-neutral results

from .ports import (
    Asset,
    AssetSource,
    AssetError,
    AssetNotFoundError,
    AssetReadError,
    FallbackMissingError,
)
from .filesystem import FileSystemAssetSource
from .memory import InMemoryAssetSource
from .media import media_type_for, DEFAULT_MEDIA_TYPE
from .server import AssetServer, AssetResult, diagnostic_message

__all__ = [
    # Ports
    "Asset",
    "AssetSource",
    "AssetError",
    "AssetNotFoundError",
    "AssetReadError",
    "FallbackMissingError",
    # Sources
    "FileSystemAssetSource",
    "InMemoryAssetSource",
    # Media types
    "media_type_for",
    "DEFAULT_MEDIA_TYPE",
    # Server
    "AssetServer",
    "AssetResult",
    "diagnostic_message",
]
