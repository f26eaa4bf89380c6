"""
In-Memory Asset Source

Dict-backed implementation for development and testing.
Errors can be injected per path to simulate unreadable files.
"""

import errno

from device_simulator.assets.ports import (
    AssetSource,
    AssetNotFoundError,
    AssetReadError,
)


class InMemoryAssetSource(AssetSource):
    """
    Asset source holding files in a dict.
    
    Keys are relative paths without a leading slash.
    """
    
    def __init__(
        self,
        files: dict[str, bytes] | None = None,
        errors: dict[str, int] | None = None,
    ):
        """
        Initialize the source.
        
        Args:
            files: Initial contents keyed by relative path
            errors: errno values raised when the given paths are read
        """
        self._files: dict[str, bytes] = dict(files or {})
        self._errors: dict[str, int] = dict(errors or {})
    
    def put(self, relative_path: str, content: bytes) -> None:
        self._files[relative_path] = content
    
    def remove(self, relative_path: str) -> None:
        self._files.pop(relative_path, None)
    
    def fail(self, relative_path: str, error_number: int) -> None:
        """Make future reads of a path fail with the given errno."""
        self._errors[relative_path] = error_number
    
    async def read(self, relative_path: str) -> bytes:
        if relative_path in self._errors:
            code = errno.errorcode.get(self._errors[relative_path], "EIO")
            if code == "ENOENT":
                raise AssetNotFoundError(relative_path)
            raise AssetReadError(relative_path, code)
        
        try:
            return self._files[relative_path]
        except KeyError:
            raise AssetNotFoundError(relative_path) from None
