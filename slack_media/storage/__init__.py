"""Export preparation and output sinks for the Slack export media extractor."""

from .archive import ExportPathError, prepare_export
from .copier import copy_binary_media
from .downloader import MediaDownloader, dedupe_references, download_media, output_name_for

__all__ = [
    'ExportPathError',
    'prepare_export',
    'copy_binary_media',
    'MediaDownloader',
    'dedupe_references',
    'download_media',
    'output_name_for'
]
