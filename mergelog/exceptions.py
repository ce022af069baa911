"""Exceptions raised by mergelog."""


class MergelogError(Exception):
    """Base class for fatal mergelog errors."""


class ConfigError(MergelogError):
    """Configuration could not be loaded or is invalid."""


class GitError(MergelogError):
    """A git invocation failed."""


class RemoteURLError(MergelogError):
    """The origin remote does not point to a supported repository."""


class GitHubAPIError(MergelogError):
    """A GitHub API request failed or returned an unexpected body."""
