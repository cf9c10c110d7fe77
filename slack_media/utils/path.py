#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Path and filename utility functions for the Slack export media extractor.
"""

import hashlib
import os
import re
from pathlib import Path
from typing import Optional

from ..config import FALLBACK_FILENAME

_UNSAFE_CHARS = re.compile(r'[\\/:*?"<>|]')


def ensure_dir(p: Path) -> None:
    """Ensure directory exists, creating it if necessary."""
    p.mkdir(parents=True, exist_ok=True)


def safe_filename(name: str) -> str:
    """Strip path and shell-hostile characters; empty names become 'file'."""
    cleaned = _UNSAFE_CHARS.sub("", name).strip()
    return cleaned or FALLBACK_FILENAME


def ext_from_mime(mime: Optional[str]) -> str:
    """Derive '.subtype' from a MIME type like 'image/png; charset=x'."""
    if not mime:
        return ""
    parts = mime.split("/")
    if len(parts) != 2:
        return ""
    sub = parts[1].split(";")[0].strip()
    return "." + sub if sub else ""


def unique_name(name: str, identity: str) -> str:
    """Insert a short stable hash of `identity` before the extension."""
    digest = hashlib.sha1(identity.encode("utf-8")).hexdigest()[:8]
    stem, ext = os.path.splitext(name)
    return f"{stem}-{digest}{ext}"
