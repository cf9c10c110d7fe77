#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Extract command: Prepare -> Classify+Scan -> Materialize.
"""

import logging
from pathlib import Path
from typing import Optional

import requests

from ..config import DEFAULT_TIMEOUT, DEFAULT_WORKERS
from ..models.results import RunSummary
from ..scanning.discovery import ExportWalker
from ..scanning.messages import scan_messages
from ..storage.archive import prepare_export
from ..storage.copier import copy_binary_media
from ..storage.downloader import dedupe_references, download_media
from ..utils.path import ensure_dir

logger = logging.getLogger(__name__)


class ExtractCommand:
    """Runs a full extraction of one export into an output directory."""

    def __init__(self, output_dir: Path, workers: int = DEFAULT_WORKERS,
                 timeout: float = DEFAULT_TIMEOUT, keep_extracted: bool = False,
                 unique_names: bool = False, session: Optional[requests.Session] = None):
        self.output_dir = Path(output_dir)
        self.workers = workers
        self.timeout = timeout
        self.keep_extracted = keep_extracted
        self.unique_names = unique_names
        self.session = session
        self.walker = ExportWalker()

    def execute(self, export_path: Path, token: Optional[str] = None) -> RunSummary:
        """Run all phases; per-item failures are counted, not raised."""
        ensure_dir(self.output_dir)

        with prepare_export(Path(export_path), keep_extracted=self.keep_extracted) as base_dir:
            # Stage 1: Classify + scan
            logger.info("[INFO] Walking export at %s", base_dir)
            json_paths, media_paths = self.walker.walk(base_dir)
            references = scan_messages(json_paths)

            summary = RunSummary(
                export_root=str(base_dir),
                json_files=len(json_paths),
                media_files=len(media_paths),
                media_references=len(references),
                unique_urls=len(dedupe_references(references)),
            )

            # Stage 2: Materialize (copy fully completes before any fetch)
            summary.copy_result = copy_binary_media(
                media_paths, self.output_dir, unique_names=self.unique_names
            )
            summary.download_result = download_media(
                references, token, self.output_dir,
                workers=self.workers,
                timeout=self.timeout,
                unique_names=self.unique_names,
                session=self.session,
            )

        self._log_summary(summary)
        return summary

    def _log_summary(self, summary: RunSummary):
        copied = summary.copy_result
        logger.info("[INFO] Copied %d of %d media files (%d failed)",
                    copied.succeeded, summary.media_files, copied.failed)
        downloaded = summary.download_result
        if downloaded is not None:
            logger.info("[INFO] Downloaded %d of %d unique URLs (%d failed, %d duplicates skipped)",
                        downloaded.succeeded, summary.unique_urls,
                        downloaded.failed, downloaded.skipped)
