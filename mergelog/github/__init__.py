"""GitHub API access."""

from .client import GitHubClient, resolve_api_url, GITHUB_HOST
from .models import PullRequest, PullRequestUser

__all__ = [
    "GitHubClient",
    "resolve_api_url",
    "GITHUB_HOST",
    "PullRequest",
    "PullRequestUser",
]
