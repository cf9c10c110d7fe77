#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Media type classification by filename extension and MIME type.
"""

import os
from typing import Optional

from ..config import IMAGE_EXT, VIDEO_EXT, SUPPORTED_EXT, MEDIA_MIME_PREFIXES


def _extension(name: str) -> str:
    return os.path.splitext(name)[1].lower()


def is_media_filename(name: str) -> bool:
    """Check if filename has a supported image or video extension."""
    return _extension(name) in SUPPORTED_EXT


def is_media_mimetype(mime: Optional[str]) -> bool:
    """Check if MIME type denotes an image or video."""
    if not mime:
        return False
    return mime.startswith(MEDIA_MIME_PREFIXES)


def is_media(name: str, mime: Optional[str] = None) -> bool:
    """Check if a file is media by MIME type or by filename extension."""
    # Export JSON sometimes has a MIME type without a matching extension and vice versa
    return is_media_mimetype(mime) or is_media_filename(name)


def media_kind(name: str) -> Optional[str]:
    """Return 'image', 'video' or None for a filename."""
    ext = _extension(name)
    if ext in IMAGE_EXT:
        return 'image'
    if ext in VIDEO_EXT:
        return 'video'
    return None
