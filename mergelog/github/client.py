"""GitHub REST client built on requests."""

import logging
import re
from typing import Any, List, Optional
from urllib.parse import urlparse

import requests
from pydantic import TypeAdapter, ValidationError

from ..exceptions import GitHubAPIError, RemoteURLError
from .models import PULL_REQUEST_LIST, PullRequest


GITHUB_HOST = "github.com"
DEFAULT_API_URL = "https://api.github.com"
CLOSED_PULLS_PAGE_SIZE = 100

# git@host:org/repo.git
SSH_REMOTE_RE = re.compile(r'^git@([^:]+):([^/]+)/([^/]+)\.git$')
REPO_PATH_RE = re.compile(r'^[^/]+/[^/]+$')


def resolve_api_url(origin: str, api_url: str = DEFAULT_API_URL) -> str:
    """Build the repository API base URL from a git remote URL.

    Args:
        origin: Remote URL, SSH (``git@github.com:org/repo.git``) or URL style
        api_url: GitHub API root

    Returns:
        Base URL ending with a slash, e.g. ``https://api.github.com/repos/org/repo/``

    Raises:
        RemoteURLError: the remote is unparseable or not hosted on github.com
    """
    origin = origin.strip()
    match = SSH_REMOTE_RE.match(origin)
    if match:
        origin = "git://" + "/".join(match.groups())

    try:
        parsed = urlparse(origin)
        host = parsed.hostname
    except ValueError as e:
        raise RemoteURLError(f"url parse: {e}") from e

    if host != GITHUB_HOST:
        raise RemoteURLError(f"only {GITHUB_HOST} repos are supported, got {origin!r}")

    path = parsed.path.strip('/')
    if path.endswith('.git'):
        path = path[:-len('.git')]
    if not REPO_PATH_RE.match(path):
        raise RemoteURLError(f"wrong repo name {path!r}")

    return f"{api_url.rstrip('/')}/repos/{path}/"


class GitHubClient:
    """Minimal client for the repository scoped GitHub REST endpoints."""

    def __init__(self, base_url: str, token: Optional[str] = None,
                 timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None,
                 logger: Optional[logging.Logger] = None):
        """Initialize GitHub client.

        Args:
            base_url: Repository API URL ending with a slash
            token: Optional OAuth2 token
            timeout: Request timeout in seconds, None waits indefinitely
            session: requests session to reuse
            logger: Logger instance
        """
        self.base_url = base_url
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)

        self.session = session or requests.Session()
        self.session.headers.update({'Accept': 'application/vnd.github.v3+json'})
        if token:
            self.session.headers.update({'Authorization': f'token {token}'})

    @classmethod
    def from_config(cls, config, git, session: Optional[requests.Session] = None) -> "GitHubClient":
        """Create a client for the repository behind git's origin remote."""
        base_url = resolve_api_url(git.remote_origin_url(), config.api_url)
        logging.getLogger(__name__).info(f"apiUrl: {base_url}")
        return cls(base_url, token=config.github_token, timeout=config.http_timeout, session=session)

    def get(self, path: str, adapter: TypeAdapter) -> Any:
        """GET a path relative to the repository URL and decode it with adapter.

        Raises:
            GitHubAPIError: transport failure or a body not matching the schema
        """
        url = self.base_url + path
        self.logger.debug(f"GET {url}")
        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise GitHubAPIError(f"can't get response from {url}: {e}") from e

        raw = resp.text
        try:
            return adapter.validate_json(raw)
        except ValidationError as e:
            raise GitHubAPIError(
                f"can't parse response {raw!r} (HTTP {resp.status_code}): {e}"
            ) from e

    def commit_pulls(self, sha: str) -> List[PullRequest]:
        """List pull requests associated with a commit."""
        return self.get(f"commits/{sha}/pulls", PULL_REQUEST_LIST)

    def closed_pulls(self) -> List[PullRequest]:
        """List the most recently updated closed pull requests."""
        return self.get(
            f"pulls?state=closed&sort=updated&direction=desc&per_page={CLOSED_PULLS_PAGE_SIZE}",
            PULL_REQUEST_LIST,
        )
