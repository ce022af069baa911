"""Thin wrapper around the git executable."""

import logging
import shlex
import subprocess
from typing import List, Optional

from ..exceptions import GitError


# Unit separator between fields of a merge log line
MERGE_LOG_SEPARATOR = "\x1f"
MERGE_LOG_FORMAT = "%H%x1f%an%x1f%s"


class GitRunner:
    """Runs git commands in a local repository."""

    def __init__(self, cwd: Optional[str] = None, executable: str = "git",
                 logger: Optional[logging.Logger] = None):
        """Initialize git runner.

        Args:
            cwd: Repository directory, defaults to the current directory
            executable: Name or path of the git binary
            logger: Logger instance
        """
        self.cwd = cwd
        self.executable = executable
        self.logger = logger or logging.getLogger(__name__)

    def run(self, *args: str) -> str:
        """Run git with the given arguments and return its stdout.

        Raises:
            GitError: git could not be started or exited non-zero
        """
        cmd = [self.executable, *args]
        cmd_line = shlex.join(cmd)
        self.logger.info(f"# {cmd_line}")

        try:
            result = subprocess.run(
                cmd,
                cwd=self.cwd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            raise GitError(f"{cmd_line}: {e}") from e

        if result.returncode != 0:
            raise GitError(
                f"{cmd_line}: exit status {result.returncode}: {result.stderr.strip()}"
            )
        return result.stdout

    def run_one_line(self, *args: str) -> str:
        return self.run(*args).strip()

    def remote_origin_url(self) -> str:
        return self.run_one_line("config", "--get", "remote.origin.url")

    def tags(self) -> List[str]:
        """List all tags of the repository."""
        return [line.strip() for line in self.run("tag").splitlines() if line.strip()]

    def merge_log(self, since: str, branch: str) -> List[str]:
        """List merge commits reachable from branch but not from since.

        Each line holds hash, author name and subject separated by
        MERGE_LOG_SEPARATOR. An empty since covers the whole branch.
        """
        rev_range = f"{since}..{branch}" if since else branch
        output = self.run("log", "--merges", f"--pretty=format:{MERGE_LOG_FORMAT}", rev_range)
        return [line for line in output.splitlines() if line.strip()]
