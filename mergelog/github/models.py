"""Schemas for the GitHub API responses mergelog reads."""

from typing import List, Optional

from pydantic import BaseModel, TypeAdapter


class PullRequestUser(BaseModel):
    login: str
    html_url: str


class PullRequest(BaseModel):
    """A pull request as returned by the pulls endpoints."""

    html_url: str
    number: int
    state: str
    title: str
    user: PullRequestUser
    merge_commit_sha: Optional[str] = None
    merged_at: Optional[str] = None

    @property
    def is_merged(self) -> bool:
        return bool(self.merged_at)


PULL_REQUEST_LIST = TypeAdapter(List[PullRequest])
