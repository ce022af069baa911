"""Strategies for collecting merged pull requests."""

import logging
import re
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

import semver

from ..config import Config, STRATEGY_TAG_DELTA
from ..git import GitRunner, MERGE_LOG_SEPARATOR
from ..github import GitHubClient, PullRequest
from .formatting import title_case
from .models import MergeInfo


# GitHub's default merge commit subject
PULL_NUMBER_RE = re.compile(r'Merge pull request #(\d+)')
MERGE_LOG_FIELDS = 3

logger = logging.getLogger(__name__)


def merge_from_pull(pull: PullRequest, commit_hash: Optional[str] = None) -> MergeInfo:
    return MergeInfo(
        commit_hash=commit_hash if commit_hash is not None else (pull.merge_commit_sha or ""),
        user_name=pull.user.login,
        user_profile_url=pull.user.html_url,
        merge_num=pull.number,
        merge_url=pull.html_url,
        title=title_case(pull.title),
    )


def parse_tag_version(tag: str) -> semver.Version:
    """Parse a tag as a semantic version, allowing a leading "v" and a missing minor or patch."""
    if tag.startswith("v"):
        tag = tag[1:]
    return semver.Version.parse(tag, optional_minor_and_patch=True)


def last_semver_tag(tags: Iterable[str]) -> str:
    """Return the tag with the highest version, as written in the repository.

    Tags that are not valid versions are logged and ignored. Returns an
    empty string when no tag qualifies.
    """
    max_ver = None
    max_tag = ""
    for tag in tags:
        try:
            ver = parse_tag_version(tag)
        except ValueError as e:
            logger.warning(f"Wrong semver tag {tag!r}: {e}. Will ignore it.")
            continue
        if max_ver is None or ver > max_ver:
            max_ver = ver
            max_tag = tag
    return max_tag


def pull_number_from_message(message: str) -> int:
    """Extract the pull request number from a merge commit message.

    Returns:
        Pull request number or 0 if not found
    """
    match = PULL_NUMBER_RE.search(message)
    if not match:
        return 0
    return int(match.group(1))


def parse_merge_log(lines: Iterable[str]) -> List[MergeInfo]:
    """Turn ``git log --merges`` lines into partially filled merges.

    Lines with an unexpected field count or without a pull request number
    are logged and skipped.
    """
    merges = []
    for line in lines:
        fields = line.split(MERGE_LOG_SEPARATOR)
        if len(fields) != MERGE_LOG_FIELDS:
            logger.warning(f"Wrong merge log line {line!r}: expected {MERGE_LOG_FIELDS} fields, got {len(fields)}")
            continue

        commit_hash, author, subject = fields
        num = pull_number_from_message(subject)
        if num <= 0:
            logger.warning(f"Can't find pull request number in merge {commit_hash}: {subject!r}")
            continue

        merges.append(MergeInfo(
            commit_hash=commit_hash,
            user_name=author,
            merge_num=num,
            title=title_case(subject),
        ))
    return merges


class HistoryStrategy(ABC):
    """Source of the merges that make up a changelog section."""

    name = ""

    @abstractmethod
    def collect(self) -> List[MergeInfo]:
        """Collect merges in changelog order."""


class ClosedPullsStrategy(HistoryStrategy):
    """Lists the most recently updated merged pull requests, ignoring tags."""

    name = "closed-pulls"

    def __init__(self, client: GitHubClient):
        self.client = client

    def collect(self) -> List[MergeInfo]:
        merges = []
        for pull in self.client.closed_pulls():
            if not pull.is_merged:
                logger.debug(f"Skipping pull request #{pull.number}: closed without merge")
                continue
            merges.append(merge_from_pull(pull))
        return merges


class TagDeltaStrategy(HistoryStrategy):
    """Lists pull requests merged into the main branch since the last version tag."""

    name = "tag-delta"

    def __init__(self, git: GitRunner, client: GitHubClient, main_branch: str = "main"):
        self.git = git
        self.client = client
        self.main_branch = main_branch

    def last_tag(self) -> str:
        return last_semver_tag(self.git.tags())

    def enrich(self, merge: MergeInfo) -> MergeInfo:
        """Fill a merge from the closed pull request that owns its commit."""
        for pull in self.client.commit_pulls(merge.commit_hash):
            if pull.state == "closed":
                return merge_from_pull(pull, commit_hash=merge.commit_hash)

        logger.warning(f"Can't find closed pull request for commit {merge.commit_hash} (#{merge.merge_num})")
        return merge

    def collect(self) -> List[MergeInfo]:
        last_tag = self.last_tag()
        if last_tag:
            logger.info(f"Last tag: {last_tag}")
        else:
            logger.warning(f"No version tags found, using the whole {self.main_branch} history")

        merges = parse_merge_log(self.git.merge_log(last_tag, self.main_branch))
        merges = [self.enrich(merge) for merge in merges]
        return sorted(merges, key=lambda m: m.merge_num, reverse=True)


def build_strategy(config: Config, git: GitRunner, client: GitHubClient) -> HistoryStrategy:
    """Select the history strategy named in the configuration."""
    if config.strategy == STRATEGY_TAG_DELTA:
        return TagDeltaStrategy(git, client, config.main_branch)
    return ClosedPullsStrategy(client)
