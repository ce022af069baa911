"""Shared fixtures for mergelog tests."""

import json
import subprocess
from unittest.mock import Mock, patch

import pytest


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep user config files and MERGELOG_* variables out of tests."""
    for name in ("GITHUB_TOKEN", "MAIN_BRANCH", "STRATEGY", "TAG", "API_URL", "HTTP_TIMEOUT", "REPO_PATH"):
        monkeypatch.delenv(f"MERGELOG_{name}", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)


def make_pull(number, title="fix bug", login="alice", state="closed",
              merged_at="2024-05-01T10:00:00Z", sha=None):
    """Build a pull request payload shaped like the GitHub API."""
    return {
        'html_url': f'https://github.com/org/repo/pull/{number}',
        'number': number,
        'state': state,
        'title': title,
        'user': {'login': login, 'html_url': f'https://github.com/{login}'},
        'merge_commit_sha': sha or f'{number:040x}',
        'merged_at': merged_at,
        'body': 'ignored',
    }


def make_response(payload, status_code=200):
    response = Mock()
    response.status_code = status_code
    response.text = payload if isinstance(payload, str) else json.dumps(payload)
    return response


def make_session(routes):
    """Session mock answering GET by URL suffix."""
    session = Mock()
    session.headers = {}

    def get(url, timeout=None):
        for suffix, payload in routes.items():
            if url.endswith(suffix):
                return make_response(payload)
        raise AssertionError(f"unexpected request {url}")

    session.get = Mock(side_effect=get)
    return session


def make_git_run(outputs, returncode=0, stderr=""):
    """subprocess.run replacement answering git calls by subcommand."""

    def run(cmd, **kwargs):
        subcommand = cmd[1]
        if subcommand not in outputs:
            return subprocess.CompletedProcess(cmd, 128, "", f"unexpected git {subcommand}")
        return subprocess.CompletedProcess(cmd, returncode, outputs[subcommand], stderr)

    return Mock(side_effect=run)


@pytest.fixture
def pull_factory():
    return make_pull


@pytest.fixture
def session_factory():
    return make_session


@pytest.fixture
def patch_git():
    """Patch subprocess.run for GitRunner with canned outputs."""
    patchers = []

    def _patch(outputs, returncode=0, stderr=""):
        run = make_git_run(outputs, returncode, stderr)
        patcher = patch('mergelog.git.runner.subprocess.run', run)
        patchers.append(patcher)
        patcher.start()
        return run

    yield _patch
    for patcher in patchers:
        patcher.stop()
