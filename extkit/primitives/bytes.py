"""Byte-string helpers: hashing, gzip and stream conversion."""

import gzip
import hashlib
import io
from typing import Optional


def get_sha1_hash(data: Optional[bytes]) -> Optional[str]:
    """Return the lowercase hex SHA-1 digest of ``data``, or None if empty."""
    if not data:
        return None
    return hashlib.sha1(data).hexdigest()


def gzip_compress(data: Optional[bytes]) -> bytes:
    if not data:
        return b""

    buffer = io.BytesIO()
    with gzip.GzipFile(fileobj=buffer, mode="wb") as zip_stream:
        zip_stream.write(data)
    return buffer.getvalue()


def gzip_decompress(data: Optional[bytes]) -> bytes:
    """Decompress gzip ``data``.

    Raises:
        gzip.BadGzipFile: If ``data`` is not gzip content
    """
    if not data:
        return b""

    with gzip.GzipFile(fileobj=io.BytesIO(data), mode="rb") as zip_stream:
        return zip_stream.read()


def to_stream(data: Optional[bytes]) -> Optional[io.BytesIO]:
    """Wrap ``data`` in a BytesIO positioned at the start."""
    if not data:
        return None

    stream = io.BytesIO(data)
    stream.seek(0)
    return stream
