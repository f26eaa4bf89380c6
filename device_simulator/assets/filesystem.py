"""
Filesystem Asset Source

Reads assets from a directory on disk. Reads run in a worker thread so a
slow disk never stalls other connections.
"""

import asyncio
import logging
from pathlib import Path

from device_simulator.assets.ports import (
    AssetSource,
    AssetNotFoundError,
    AssetReadError,
    error_code,
)

logger = logging.getLogger(__name__)


class FileSystemAssetSource(AssetSource):
    """
    Asset source backed by a content root directory.
    
    Paths escaping the root (via ".." or symlinks) are reported as
    not found.
    """
    
    def __init__(self, root: Path | str):
        self._root = Path(root).resolve()
    
    @property
    def root(self) -> Path:
        return self._root
    
    async def read(self, relative_path: str) -> bytes:
        return await asyncio.to_thread(self._read_sync, relative_path)
    
    def _read_sync(self, relative_path: str) -> bytes:
        try:
            target = (self._root / relative_path).resolve()
        except ValueError:
            # embedded NUL byte
            raise AssetReadError(relative_path, "EINVAL") from None

        if not target.is_relative_to(self._root):
            logger.warning(f"Rejected path outside content root: {relative_path}")
            raise AssetNotFoundError(relative_path)
        
        try:
            return target.read_bytes()
        except FileNotFoundError as e:
            raise AssetNotFoundError(relative_path, error_code(e)) from e
        except OSError as e:
            raise AssetReadError(relative_path, error_code(e)) from e
