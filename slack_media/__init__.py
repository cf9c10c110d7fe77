"""Slack Export Media Extractor - copy and download images and videos from Slack exports."""

__version__ = "1.0.0"
__author__ = "Media Tool Team"

# Import key classes for convenient top-level access
from .commands import ExtractCommand
from .models import MediaReference, ClassifiedPath, SinkResult, RunSummary
from .scanning import ExportWalker, walk_export, collect_media_from_json, clean_slack_url
from .storage import MediaDownloader, copy_binary_media, download_media, prepare_export

__all__ = [
    # Core classes
    'ExtractCommand',
    'ExportWalker',
    'MediaDownloader',

    # Pipeline functions
    'walk_export',
    'collect_media_from_json',
    'clean_slack_url',
    'copy_binary_media',
    'download_media',
    'prepare_export',

    # Data models
    'MediaReference',
    'ClassifiedPath',
    'SinkResult',
    'RunSummary',

    # Package metadata
    '__version__',
    '__author__'
]
