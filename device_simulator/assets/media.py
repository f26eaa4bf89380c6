"""
Media Type Lookup

Extension to MIME mapping built from Python's bundled table only, so the
result does not depend on the host's /etc/mime.types.
"""

import mimetypes

DEFAULT_MEDIA_TYPE = "application/octet-stream"

# Container types for files carrying a compression suffix
ENCODING_MEDIA_TYPES = {
    "gzip": "application/gzip",
    "bzip2": "application/x-bzip2",
    "xz": "application/x-xz",
    "br": "application/x-brotli",
}

_types = mimetypes.MimeTypes()
_types.add_type("text/html", ".htm")
_types.add_type("image/x-icon", ".ico")


def media_type_for(name: str) -> str:
    """
    Media type for a file name, from its extension.
    
    "app.js" -> "text/javascript", "app.js.gz" -> "application/gzip",
    anything unmapped -> "application/octet-stream".
    """
    if hasattr(_types, "guess_file_type"):
        # 3.13+: guess_type URL-parses and drops anything after "#" or "?"
        media_type, encoding = _types.guess_file_type(name, strict=False)
    else:
        media_type, encoding = _types.guess_type(name, strict=False)
    if encoding is not None:
        return ENCODING_MEDIA_TYPES.get(encoding, DEFAULT_MEDIA_TYPE)
    return media_type or DEFAULT_MEDIA_TYPE
