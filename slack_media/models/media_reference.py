#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Data structures for discovered media in the Slack export media extractor.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class MediaReference:
    """Remote media file found inside an export message."""
    url: str  # normalized, signed query params removed
    display_name: str
    mime_type: Optional[str] = None
    file_id: Optional[str] = None

    def __post_init__(self):
        if not self.url:
            raise ValueError("MediaReference requires a non-empty url")


@dataclass(frozen=True)
class ClassifiedPath:
    """A file found while walking the export."""
    path: Path
    kind: str  # 'json' or 'media'

    @property
    def is_json(self) -> bool:
        return self.kind == 'json'
