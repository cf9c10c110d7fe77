"""Utility functions for the Slack export media extractor."""

from .path import ensure_dir, safe_filename, ext_from_mime, unique_name

__all__ = ['ensure_dir', 'safe_filename', 'ext_from_mime', 'unique_name']
