"""Command implementations for the Slack export media extractor."""

from .extract import ExtractCommand

__all__ = ['ExtractCommand']
