"""Changelog generation module."""

from .formatting import render_section, title_case
from .generator import generate
from .models import MergeInfo
from .strategies import (
    ClosedPullsStrategy,
    HistoryStrategy,
    TagDeltaStrategy,
    build_strategy,
    last_semver_tag,
    parse_merge_log,
    pull_number_from_message,
)

__all__ = [
    "render_section",
    "title_case",
    "generate",
    "MergeInfo",
    "ClosedPullsStrategy",
    "HistoryStrategy",
    "TagDeltaStrategy",
    "build_strategy",
    "last_semver_tag",
    "parse_merge_log",
    "pull_number_from_message",
]
