"""Scanning modules for the Slack export media extractor."""

from .classifier import is_media, is_media_filename, is_media_mimetype, media_kind
from .discovery import ExportWalker, walk_export
from .messages import clean_slack_url, collect_media_from_json, scan_messages

__all__ = [
    'is_media',
    'is_media_filename',
    'is_media_mimetype',
    'media_kind',
    'ExportWalker',
    'walk_export',
    'clean_slack_url',
    'collect_media_from_json',
    'scan_messages'
]
