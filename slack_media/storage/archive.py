#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Export root resolution: use a directory as-is or extract a .zip export.
"""

import contextlib
import logging
import shutil
import tempfile
import zipfile
from pathlib import Path
from typing import Iterator

from ..config import ARCHIVE_EXT, TEMP_PREFIX

logger = logging.getLogger(__name__)


class ExportPathError(ValueError):
    """Export path is missing or is neither a directory nor a .zip file."""


def extract_archive(archive: Path, dest: Path) -> Path:
    """Extract every member of a zip archive into dest."""
    logger.info("[INFO] Extracting %s to %s", archive, dest)
    with zipfile.ZipFile(archive) as zf:
        zf.extractall(dest)
    return dest


@contextlib.contextmanager
def prepare_export(export_path: Path, keep_extracted: bool = False) -> Iterator[Path]:
    """
    Resolve the directory to walk for an export.

    Directories are yielded unchanged. A .zip file is extracted into a fresh
    temporary directory which is removed on exit unless keep_extracted is set.

    Raises:
        ExportPathError: path missing, or not a directory / .zip file
        zipfile.BadZipFile: archive is corrupt
    """
    export_path = Path(export_path)
    if not export_path.exists():
        raise ExportPathError(f"Path not found: {export_path}")

    if export_path.is_dir():
        yield export_path
        return

    if not (export_path.is_file() and export_path.suffix.lower() == ARCHIVE_EXT):
        raise ExportPathError(f"Path {export_path} is neither directory nor .zip file")

    tmp_dir = Path(tempfile.mkdtemp(prefix=TEMP_PREFIX))
    try:
        yield extract_archive(export_path, tmp_dir)
    finally:
        if keep_extracted:
            logger.info("[INFO] Keeping extracted export at %s", tmp_dir)
        else:
            logger.debug("Removing extracted export %s", tmp_dir)
            shutil.rmtree(tmp_dir, ignore_errors=True)
