#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Local-copy sink: copies media files found directly in the export tree.
"""

import logging
import shutil
from pathlib import Path
from typing import Sequence

from tqdm import tqdm

from ..config import EXPORTED_DIRNAME
from ..models.results import SinkResult
from ..utils.path import ensure_dir, safe_filename, unique_name

logger = logging.getLogger(__name__)


def copy_binary_media(files: Sequence[Path], output_dir: Path,
                      unique_names: bool = False) -> SinkResult:
    """
    Copy export media into <output_dir>/exported_files.

    Same-named files overwrite each other unless unique_names is set, in
    which case a hash of the source path is added to each name.
    A failed copy is logged and counted; remaining files are still copied.
    """
    target_root = Path(output_dir) / EXPORTED_DIRNAME
    ensure_dir(target_root)

    result = SinkResult()
    for src in tqdm(files, desc="Copying", unit="file", disable=None):
        src = Path(src)
        name = safe_filename(src.name)
        if unique_names:
            name = unique_name(name, str(src))
        dst = target_root / name
        try:
            shutil.copyfile(src, dst)
            logger.info("[COPY] %s -> %s", src, dst)
            result.succeeded += 1
        except OSError as e:
            logger.error("[COPY-ERROR] %s: %s", src, e)
            result.record_failure(str(src), str(e))

    return result
