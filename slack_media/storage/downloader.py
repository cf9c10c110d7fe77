#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Remote-fetch sink: downloads media referenced by export JSON using a
Slack bearer token.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import requests
from requests.adapters import HTTPAdapter
from tqdm import tqdm

from ..config import DEFAULT_TIMEOUT, DEFAULT_WORKERS, DOWNLOADED_DIRNAME, FALLBACK_FILENAME
from ..models.media_reference import MediaReference
from ..models.results import SinkResult
from ..utils.path import ensure_dir, ext_from_mime, safe_filename, unique_name

logger = logging.getLogger(__name__)


def dedupe_references(refs: Sequence[MediaReference]) -> List[MediaReference]:
    """Drop references whose URL was already seen; first occurrence wins."""
    seen = set()
    unique: List[MediaReference] = []
    for ref in refs:
        if ref.url in seen:
            continue
        seen.add(ref.url)
        unique.append(ref)
    return unique


def output_name_for(ref: MediaReference, unique_names: bool = False) -> str:
    """Destination filename for a reference, adding an extension from its MIME type if needed."""
    name = ref.display_name or ref.file_id or FALLBACK_FILENAME
    if not os.path.splitext(name)[1]:
        name += ext_from_mime(ref.mime_type)
    name = safe_filename(name)
    if unique_names:
        name = unique_name(name, ref.url)
    return name


class MediaDownloader:
    """Fetch each unique media URL once with an Authorization header."""

    def __init__(self, token: str, output_dir: Path, workers: int = DEFAULT_WORKERS,
                 timeout: float = DEFAULT_TIMEOUT, unique_names: bool = False,
                 session: Optional[requests.Session] = None):
        self.token = token
        self.target_root = Path(output_dir) / DOWNLOADED_DIRNAME
        self.workers = max(1, workers)
        self.timeout = timeout
        self.unique_names = unique_names
        self._owns_session = session is None
        self.session = session or self._create_session()

    def _create_session(self) -> requests.Session:
        """Create a session sized for the worker pool."""
        session = requests.Session()
        adapter = HTTPAdapter(pool_connections=self.workers, pool_maxsize=self.workers)
        session.mount("https://", adapter)
        session.mount("http://", adapter)
        return session

    def close(self):
        if self._owns_session:
            self.session.close()

    def fetch(self, ref: MediaReference, dst: Path) -> Tuple[bool, str]:
        """Download one reference to dst. Returns (ok, error message)."""
        logger.info("[DOWNLOAD] %s -> %s", ref.url, dst)
        try:
            res = self.session.get(
                ref.url,
                headers={"Authorization": f"Bearer {self.token}"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error("[DOWNLOAD-ERROR] %s: %s", ref.url, e)
            return False, str(e)

        if not 200 <= res.status_code < 300:
            reason = f"{res.status_code} {res.reason or ''}".strip()
            logger.error("[DOWNLOAD-ERROR] %s: %s", ref.url, reason)
            return False, reason

        try:
            dst.write_bytes(res.content)
        except OSError as e:
            logger.error("[DOWNLOAD-ERROR] %s: %s", ref.url, e)
            return False, str(e)

        logger.info("[OK] %s", dst)
        return True, ""

    def _fetch_group(self, group: List[Tuple[MediaReference, Path]]
                     ) -> List[Tuple[MediaReference, Tuple[bool, str]]]:
        # Refs sharing a destination run in reference order so the last one wins
        return [(ref, self.fetch(ref, dst)) for ref, dst in group]

    def download_all(self, refs: Sequence[MediaReference]) -> SinkResult:
        """Deduplicate refs, then fetch them with at most `workers` requests in flight.

        References that map to the same output file are fetched sequentially
        by one task, so writes to a destination never overlap.
        """
        unique = dedupe_references(refs)
        result = SinkResult(skipped=len(refs) - len(unique))
        ensure_dir(self.target_root)

        groups: Dict[Path, List[Tuple[MediaReference, Path]]] = {}
        for ref in unique:
            dst = self.target_root / output_name_for(ref, self.unique_names)
            groups.setdefault(dst, []).append((ref, dst))

        progress = tqdm(total=len(unique), desc="Downloading", unit="file", disable=None)
        try:
            if self.workers == 1:
                for group in groups.values():
                    for ref, outcome in self._fetch_group(group):
                        self._record(result, ref, outcome)
                        progress.update(1)
            else:
                with ThreadPoolExecutor(max_workers=self.workers) as pool:
                    futures = [pool.submit(self._fetch_group, group) for group in groups.values()]
                    for fut in as_completed(futures):
                        for ref, outcome in fut.result():
                            self._record(result, ref, outcome)
                            progress.update(1)
        finally:
            progress.close()

        return result

    @staticmethod
    def _record(result: SinkResult, ref: MediaReference, outcome: Tuple[bool, str]):
        ok, error = outcome
        if ok:
            result.succeeded += 1
        else:
            result.record_failure(ref.url, error)


def download_media(refs: Sequence[MediaReference], token: Optional[str], output_dir: Path,
                   workers: int = DEFAULT_WORKERS, timeout: float = DEFAULT_TIMEOUT,
                   unique_names: bool = False,
                   session: Optional[requests.Session] = None) -> Optional[SinkResult]:
    """
    Download referenced media into <output_dir>/downloaded_from_urls.

    Returns None when there is nothing to fetch or no token was supplied.
    """
    if not refs:
        return None

    if not token:
        logger.info("[INFO] Media URLs found in JSON, but no --token provided. Skipping downloads.")
        return None

    downloader = MediaDownloader(token, output_dir, workers=workers, timeout=timeout,
                                 unique_names=unique_names, session=session)
    try:
        return downloader.download_all(refs)
    finally:
        downloader.close()
