#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Per-run counters returned by the sinks and the orchestrator.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass
class SinkResult:
    """Outcome of one materialization sink."""
    succeeded: int = 0
    failed: int = 0
    skipped: int = 0
    failures: List[Tuple[str, str]] = field(default_factory=list)  # (item, reason)

    @property
    def total(self) -> int:
        return self.succeeded + self.failed + self.skipped

    def record_failure(self, item: str, reason: str) -> None:
        self.failed += 1
        self.failures.append((item, reason))


@dataclass
class RunSummary:
    """Aggregated counts for a complete extraction run."""
    export_root: str
    json_files: int = 0
    media_files: int = 0
    media_references: int = 0
    unique_urls: int = 0
    copy_result: SinkResult = field(default_factory=SinkResult)
    download_result: Optional[SinkResult] = None  # None when downloads were skipped

    @property
    def failed(self) -> int:
        failed = self.copy_result.failed
        if self.download_result:
            failed += self.download_result.failed
        return failed
