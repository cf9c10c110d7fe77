#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Unit tests for export tree discovery.
"""

import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from slack_media.scanning.discovery import ExportWalker, walk_export


def _touch(path: Path, data: bytes = b"x") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path


@pytest.fixture
def export_tree(tmp_path):
    """Export with JSON and media files nested at varying depths."""
    root = tmp_path / "export"
    json_files = [
        _touch(root / "channels.json", b"[]"),
        _touch(root / "general" / "2024-01-01.json", b"[]"),
        _touch(root / "general" / "2024-01-02.JSON", b"[]"),
        _touch(root / "random" / "deep" / "nested" / "2024-02-01.json", b"[]"),
    ]
    media_files = [
        _touch(root / "general" / "cat.jpg"),
        _touch(root / "random" / "deep" / "clip.MP4"),
        _touch(root / "random" / "deep" / "nested" / "pic.heic"),
    ]
    _touch(root / "README.txt")
    _touch(root / "general" / "notes.pdf")
    (root / "empty").mkdir()
    return root, json_files, media_files


class TestExportWalker:

    def test_counts_and_membership(self, export_tree):
        root, json_files, media_files = export_tree
        json_paths, media_paths = walk_export(root)

        assert len(json_paths) == len(json_files)
        assert len(media_paths) == len(media_files)
        assert set(json_paths) == set(json_files)
        assert set(media_paths) == set(media_files)
        assert not set(json_paths) & set(media_paths)

    def test_classify_yields_kinds(self, export_tree):
        root, _, _ = export_tree
        kinds = {item.path.name: item.kind for item in ExportWalker().classify(root)}

        assert kinds["2024-01-02.JSON"] == "json"
        assert kinds["clip.MP4"] == "media"
        assert "README.txt" not in kinds
        assert "notes.pdf" not in kinds

    def test_json_with_media_like_name_is_json(self, tmp_path):
        _touch(tmp_path / "photo.png.json", b"[]")
        json_paths, media_paths = walk_export(tmp_path)
        assert [p.name for p in json_paths] == ["photo.png.json"]
        assert media_paths == []

    def test_empty_root(self, tmp_path):
        assert walk_export(tmp_path) == ([], [])

    def test_missing_root_propagates(self, tmp_path):
        with pytest.raises(OSError):
            walk_export(tmp_path / "does-not-exist")

    def test_unreadable_subdirectory_aborts_walk(self, export_tree):
        root, _, _ = export_tree
        real_scandir = os.scandir

        def failing_scandir(path):
            if Path(path).name == "random":
                raise PermissionError("denied")
            return real_scandir(path)

        with patch("slack_media.scanning.discovery.os.scandir", side_effect=failing_scandir):
            with pytest.raises(PermissionError):
                walk_export(root)
