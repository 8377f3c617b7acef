import io
import os
from typing import Any
from uuid import uuid4

from .exceptions import InvalidInputError

HTTPS_PREFIX = "https://"


def generate_filename() -> str:
    return str(uuid4())


def resolve_url(base_url: str, uri: str) -> str:
    if uri.startswith(HTTPS_PREFIX):
        return uri
    host = base_url.removeprefix(HTTPS_PREFIX).rstrip("/")
    return f"{HTTPS_PREFIX}{host}/{uri.lstrip('/')}"


def check_source(source: Any) -> None:
    """
    Make sure the byte source can be read from the start.

    :param source: binary file-like object
    :raises InvalidInputError: when the source is closed, unreadable or cannot rewind
    """
    if source is None or not hasattr(source, "read"):
        raise InvalidInputError("Source is not a readable byte stream")
    if getattr(source, "closed", False):
        raise InvalidInputError("Source is closed")
    if isinstance(source, io.TextIOBase):
        raise InvalidInputError("Source must be opened in binary mode")
    try:
        readable = source.readable() if hasattr(source, "readable") else True
        seekable = source.seekable() if hasattr(source, "seekable") else False
    except (OSError, ValueError) as exception:
        raise InvalidInputError(str(exception)) from exception
    if not readable:
        raise InvalidInputError("Source is not readable")
    if not seekable:
        raise InvalidInputError("Source does not support rewinding")


def probe_size(source: Any) -> int:
    """Size in bytes, by stat on a real descriptor or by seeking to the end and back."""
    try:
        return os.fstat(source.fileno()).st_size
    except (AttributeError, OSError, ValueError):
        pass

    try:
        source.seek(0, io.SEEK_END)
        size = source.tell()
        source.seek(0)
        return size
    except (OSError, ValueError):
        return 0
