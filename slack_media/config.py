#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Global configuration and constants for the Slack export media extractor.
"""

from typing import Set, Tuple

# File type categories
IMAGE_EXT: Set[str] = {".jpg", ".jpeg", ".png", ".gif", ".webp", ".heic", ".heif", ".avif"}
VIDEO_EXT: Set[str] = {".mp4", ".mov", ".m4v", ".avi", ".mkv", ".webm"}
SUPPORTED_EXT: Set[str] = IMAGE_EXT | VIDEO_EXT
JSON_EXT = ".json"
ARCHIVE_EXT = ".zip"

MEDIA_MIME_PREFIXES: Tuple[str, ...] = ("image/", "video/")

# Output layout
EXPORTED_DIRNAME = "exported_files"
DOWNLOADED_DIRNAME = "downloaded_from_urls"
FALLBACK_FILENAME = "file"

# Signed query parameters Slack embeds in export URLs; the bearer token replaces them
STRIPPED_QUERY_PARAMS: Set[str] = {"token", "t", "pub_secret"}

# Preference order for file record fields
NAME_FIELDS: Tuple[str, ...] = ("name", "title", "id")
URL_FIELDS: Tuple[str, ...] = ("url_private_download", "url_private")

# Processing defaults (can be overridden by CLI)
DEFAULT_WORKERS = 4
DEFAULT_TIMEOUT = 60.0  # seconds per request
TEMP_PREFIX = "slack_export_"
