#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Message file scanning for the Slack export media extractor.
Parses exported channel JSON and collects remote media references.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from ..config import FALLBACK_FILENAME, NAME_FIELDS, STRIPPED_QUERY_PARAMS, URL_FIELDS
from ..models.media_reference import MediaReference
from .classifier import is_media

logger = logging.getLogger(__name__)


def clean_slack_url(raw_url: str) -> str:
    """Remove expired signed query parameters from a Slack file URL.

    The host is lowercased and an empty path becomes '/', so equivalent
    URLs compare equal. Strings that cannot be parsed as an absolute URL
    are returned unchanged.
    """
    try:
        parts = urlsplit(raw_url)
    except ValueError:
        return raw_url
    if not parts.scheme or not parts.netloc:
        return raw_url

    userinfo, sep, host = parts.netloc.rpartition("@")
    netloc = userinfo + sep + host.lower()
    path = parts.path or "/"

    params = parse_qsl(parts.query, keep_blank_values=True)
    kept = [(k, v) for k, v in params if k not in STRIPPED_QUERY_PARAMS]
    query = parts.query if len(kept) == len(params) else urlencode(kept)

    return urlunsplit(parts._replace(netloc=netloc, path=path, query=query))


def _first_str(record: Dict[str, Any], fields: Iterable[str]) -> Optional[str]:
    for name in fields:
        value = record.get(name)
        if isinstance(value, str) and value:
            return value
    return None


def _reference_from_record(record: Dict[str, Any]) -> Optional[MediaReference]:
    url = _first_str(record, URL_FIELDS)
    if not url:
        return None

    mime = record.get("mimetype")
    if not isinstance(mime, str):
        mime = None
    name = _first_str(record, NAME_FIELDS) or FALLBACK_FILENAME

    if not is_media(name, mime):
        return None

    file_id = record.get("id")
    return MediaReference(
        url=clean_slack_url(url),
        display_name=name,
        mime_type=mime,
        file_id=file_id if isinstance(file_id, str) else None,
    )


def collect_media_from_json(json_path: Path) -> List[MediaReference]:
    """Return media references from one export message file.

    Unreadable or malformed files yield an empty list.
    """
    try:
        with open(json_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        logger.debug("Skipping unreadable JSON %s: %s", json_path, e)
        return []

    if not isinstance(data, list):
        return []

    media: List[MediaReference] = []
    for msg in data:
        if not isinstance(msg, dict):
            continue
        files = msg.get("files") or []
        if not isinstance(files, list):
            continue
        for record in files:
            if not isinstance(record, dict):
                continue
            ref = _reference_from_record(record)
            if ref is not None:
                media.append(ref)
    return media


def scan_messages(json_paths: Iterable[Path]) -> List[MediaReference]:
    """Collect media references from every JSON file, preserving order."""
    all_media: List[MediaReference] = []
    for json_path in json_paths:
        entries = collect_media_from_json(json_path)
        if entries:
            logger.info("[INFO] %s: %d media URLs", json_path, len(entries))
            all_media.extend(entries)

    logger.info("[INFO] Total media URLs found in JSON: %d", len(all_media))
    return all_media
