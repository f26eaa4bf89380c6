"""
Asset Server

Resolves request paths to files under the content root.

Outcomes:
- hit: 200 with the derived media type and the file bytes
- "<file>" absent but "<file>.gz" present: 200, compressed bytes,
  Content-Encoding: gzip
- absent: 200 with the fallback document's bytes (not 404)
- any other read failure, or the fallback itself missing: 500 with a
  diagnostic naming the error code
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from device_simulator.assets.media import media_type_for
from device_simulator.assets.ports import (
    Asset,
    AssetSource,
    AssetNotFoundError,
    AssetReadError,
    FallbackMissingError,
)

logger = logging.getLogger(__name__)

GZIP_SUFFIX = ".gz"


def diagnostic_message(code: str) -> str:
    """Body of a 500 response."""
    return f"Sorry, check with the site admin for error: {code} ..\n"


@dataclass(frozen=True)
class AssetResult:
    """Transport-neutral response produced by the asset server."""
    status_code: int
    relative_path: str
    media_type: str
    body: bytes
    headers: dict[str, str] = field(default_factory=dict)


class AssetServer:
    """
    Serves static assets from an AssetSource.
    
    Stateless: every request re-reads the source, nothing is cached.
    """
    
    def __init__(
        self,
        source: AssetSource,
        default_document: str = "index.htm",
        fallback_document: str = "404.html",
        serve_gzip: bool = True,
    ):
        """
        Initialize the server.
        
        Args:
            source: Where asset bytes come from
            default_document: File substituted for "/"
            fallback_document: File served for absent paths
            serve_gzip: Look for "<file>.gz" before giving up on "<file>"
        """
        self._source = source
        self._default_document = default_document.lstrip("/")
        self._fallback_document = fallback_document.lstrip("/")
        self._serve_gzip = serve_gzip
    
    def resolve(self, path: str) -> str:
        """Map a request path to a path relative to the content root."""
        if path in ("", "/"):
            return self._default_document
        return path.lstrip("/")
    
    async def load(self, relative_path: str) -> Asset:
        """
        Load an asset, trying its gzip sibling when enabled.
        
        Raises:
            AssetNotFoundError: If neither the file nor its sibling exists
            AssetReadError: On any other read failure
        """
        media_type = media_type_for(relative_path)
        try:
            content = await self._source.read(relative_path)
            return Asset(relative_path, media_type, content)
        except AssetNotFoundError:
            if not self._serve_gzip or relative_path.endswith(GZIP_SUFFIX):
                raise
        
        try:
            content = await self._source.read(relative_path + GZIP_SUFFIX)
        except AssetNotFoundError:
            raise AssetNotFoundError(relative_path) from None
        return Asset(relative_path, media_type, content, content_encoding="gzip")
    
    async def load_fallback(self) -> bytes:
        """
        Read the fallback document.
        
        Raises:
            FallbackMissingError: If it cannot be read for any reason
        """
        try:
            return await self._source.read(self._fallback_document)
        except (AssetNotFoundError, AssetReadError) as e:
            raise FallbackMissingError(self._fallback_document, e.code) from e
    
    async def serve(self, path: str) -> AssetResult:
        """
        Produce the response for a GET of the given path.
        
        Args:
            path: Decoded request path, e.g. "/css/site.css"
        """
        relative_path = self.resolve(path)
        media_type = media_type_for(relative_path)
        logger.info(f"filepath={relative_path}")
        
        try:
            try:
                asset = await self.load(relative_path)
            except AssetNotFoundError:
                # The fallback keeps the media type of the requested path
                body = await self.load_fallback()
                logger.info(f"ENOENT {relative_path} => {media_type}")
                return AssetResult(200, relative_path, media_type, body)
        
        except AssetReadError as e:
            logger.error(f"Error {relative_path} => {media_type} ({e.code})")
            return AssetResult(
                500,
                relative_path,
                "text/plain",
                diagnostic_message(e.code).encode("utf-8"),
            )
        
        headers = {}
        if asset.content_encoding:
            headers["Content-Encoding"] = asset.content_encoding
        logger.info(f"Sent {relative_path} => {asset.media_type}")
        return AssetResult(200, relative_path, asset.media_type, asset.content, headers)
