"""
Asset Port Interfaces

Contracts for reading device web assets.
The asset server depends only on AssetSource; adapters (filesystem,
in-memory) implement it.

Error taxonomy:
- AssetNotFoundError: the file does not exist (recovered by the fallback document)
- AssetReadError: any other read failure (reported as status 500)
- FallbackMissingError: the fallback document itself could not be read
"""

from __future__ import annotations

import errno
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Asset:
    """A resolved asset ready to be sent."""
    relative_path: str
    media_type: str
    content: bytes
    content_encoding: str | None = None


class AssetError(Exception):
    """Base error for asset reads."""
    
    def __init__(self, relative_path: str, code: str):
        self.relative_path = relative_path
        self.code = code
        super().__init__(f"{code}: {relative_path}")


class AssetNotFoundError(AssetError):
    """Raised when the requested file does not exist."""
    
    def __init__(self, relative_path: str, code: str = "ENOENT"):
        super().__init__(relative_path, code)


class AssetReadError(AssetError):
    """Raised when a file exists but cannot be read."""


class FallbackMissingError(AssetReadError):
    """Raised when the fallback document cannot be read."""


def error_code(exc: OSError) -> str:
    """Symbolic POSIX name for an OS error, e.g. "EACCES"."""
    if exc.errno is not None and exc.errno in errno.errorcode:
        return errno.errorcode[exc.errno]
    return type(exc).__name__


class AssetSource(ABC):
    """
    Read-only access to the content root.
    
    Implementations must be safe for concurrent async usage.
    """
    
    @abstractmethod
    async def read(self, relative_path: str) -> bytes:
        """
        Read the full contents of an asset.
        
        Args:
            relative_path: Path relative to the content root, "/"-separated
            
        Returns:
            The file's current bytes
            
        Raises:
            AssetNotFoundError: If the file does not exist
            AssetReadError: If the file exists but cannot be read
        """
        pass
