"""Data models for the Slack export media extractor."""

from .media_reference import MediaReference, ClassifiedPath
from .results import SinkResult, RunSummary

__all__ = ['MediaReference', 'ClassifiedPath', 'SinkResult', 'RunSummary']
