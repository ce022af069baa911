"""Local git repository access."""

from .runner import GitRunner, MERGE_LOG_SEPARATOR

__all__ = ["GitRunner", "MERGE_LOG_SEPARATOR"]
