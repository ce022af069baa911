"""Changelog generation pipeline."""

import logging
from typing import Optional

from ..config import Config
from ..exceptions import MergelogError
from ..git import GitRunner
from ..github import GitHubClient
from .formatting import render_section
from .strategies import build_strategy


def generate(config: Config, git: Optional[GitRunner] = None,
             client: Optional[GitHubClient] = None) -> str:
    """Generate a changelog section for the repository.

    Args:
        config: Configuration object
        git: Git runner, defaults to one in config.repo_path
        client: GitHub client, defaults to one resolved from the origin remote

    Returns:
        Rendered Markdown section

    Raises:
        MergelogError: any unrecoverable failure
    """
    logger = logging.getLogger(__name__)
    git = git or GitRunner(config.repo_path)

    if client is None:
        try:
            client = GitHubClient.from_config(config, git)
        except MergelogError as e:
            raise type(e)(f"can't get repo url: {e}") from e

    strategy = build_strategy(config, git, client)
    logger.info(f"Collecting merges with {strategy.name} strategy")

    try:
        merges = strategy.collect()
    except MergelogError as e:
        raise type(e)(f"can't get merges: {e}") from e

    logger.info(f"Found {len(merges)} merged pull requests")
    return render_section(merges, tag=config.tag)
