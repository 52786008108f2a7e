"""
Charset name handling.

Endpoints accept a ``charset`` option naming the text encoding of the
files they consume. Only the name is validated here; decoding file
contents is left to whoever reads the files.
"""

import codecs
import logging
from typing import Optional

# Set up module logger
logger = logging.getLogger(__name__)


def lookup_charset(name: Optional[str]) -> Optional[codecs.CodecInfo]:
    """
    Look up the codec for a charset name.

    Args:
        name: Charset name as written by the user (e.g. ``UTF-8``).

    Returns:
        The matching CodecInfo, or None if the name is empty or unknown.
    """
    if not name or not name.strip():
        return None
    try:
        return codecs.lookup(name.strip())
    except LookupError:
        logger.debug(f"Unknown charset: {name}")
        return None


def is_supported_charset(name: Optional[str]) -> bool:
    """Check whether a charset name maps to a text encoding Python can use."""
    info = lookup_charset(name)
    if info is None:
        return False
    # bytes-to-bytes codecs such as base64 or zlib are not text encodings
    return getattr(info, '_is_text_encoding', True)


def canonical_charset(name: str) -> Optional[str]:
    """
    Get Python's canonical codec name for a charset.

    Args:
        name: Charset name in any accepted spelling.

    Returns:
        Canonical codec name (``UTF-8`` becomes ``utf-8``), or None if unknown.
    """
    info = lookup_charset(name)
    return info.name if info is not None else None
