#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Export tree discovery for the Slack export media extractor.
Recursively walks an export root and buckets files into JSON message
files and binary media files.
"""

import logging
import os
import time
from pathlib import Path
from typing import Iterator, List, Tuple

from ..config import JSON_EXT
from ..models.media_reference import ClassifiedPath
from .classifier import is_media_filename, media_kind

logger = logging.getLogger(__name__)


class ExportWalker:
    """Depth-first walker that classifies export files.

    Directory symlinks are followed without loop detection, so an export
    containing a symlink cycle will not terminate. Errors reading a
    directory propagate to the caller.
    """

    def classify(self, root: Path) -> Iterator[ClassifiedPath]:
        """Yield a ClassifiedPath for every JSON or media file under root."""
        with os.scandir(root) as entries:
            for entry in entries:
                if entry.is_dir():
                    yield from self.classify(Path(entry.path))
                elif entry.is_file():
                    if entry.name.lower().endswith(JSON_EXT):
                        yield ClassifiedPath(Path(entry.path), 'json')
                    elif is_media_filename(entry.name):
                        yield ClassifiedPath(Path(entry.path), 'media')

    def walk(self, root: Path) -> Tuple[List[Path], List[Path]]:
        """
        Walk root and split files into JSON and media paths.

        Args:
            root: Export directory to walk

        Returns:
            (json_paths, media_paths) in traversal order
        """
        json_paths: List[Path] = []
        media_paths: List[Path] = []

        start_time = time.perf_counter()
        for item in self.classify(root):
            if item.is_json:
                json_paths.append(item.path)
            else:
                media_paths.append(item.path)
        elapsed = time.perf_counter() - start_time

        self._log_summary(json_paths, media_paths, elapsed)
        return json_paths, media_paths

    def _log_summary(self, json_paths: List[Path], media_paths: List[Path], elapsed: float):
        logger.info("[INFO] Found %d JSON files and %d media files in export.",
                    len(json_paths), len(media_paths))
        if media_paths:
            image_count = sum(1 for p in media_paths if media_kind(p.name) == 'image')
            video_count = len(media_paths) - image_count
            logger.debug("  - File types: %d images, %d videos (%.1fs)",
                         image_count, video_count, elapsed)


def walk_export(root: Path) -> Tuple[List[Path], List[Path]]:
    """Convenience function for export discovery."""
    return ExportWalker().walk(Path(root))
