import logging

import pytest
from pathlib import Path

from github import UnknownObjectException

from error_handling import GitError, PushFailedError


class FakeResp:
    def __init__(self, status_code=200, json_data=None, text=""):
        self.status_code = status_code
        self._json = json_data or {}
        self.text = text

    def json(self):
        return self._json


class ScriptedPrompter:
    """Answers prompts from a fixed script and records what was asked."""

    def __init__(self, answers=None, secrets=None):
        self.answers = list(answers or [])
        self.secrets = list(secrets or [])
        self.asked = []

    def secret(self, message):
        self.asked.append(message)
        return self.secrets.pop(0)

    def ask(self, message):
        self.asked.append(message)
        return self.answers.pop(0) if self.answers else ""


class FakeOrganization:
    def __init__(self, github, login):
        self.github = github
        self.login = login

    def create_repo(self, name, private=False, **kwargs):
        self.github.create_calls.append((self.login, name, private))
        if self.github.create_error:
            raise self.github.create_error
        self.github.repos.add(f"{self.login}/{name}")
        return type("Repo", (), {"full_name": f"{self.login}/{name}"})()


class FakeGithub:
    """In-memory stand-in for github.Github."""

    def __init__(self, repos=None, probe_error=None, create_error=None):
        self.repos = set(repos or [])
        self.probe_error = probe_error
        self.create_error = create_error
        self.create_calls = []
        self.probe_calls = []

    def get_repo(self, full_name):
        self.probe_calls.append(full_name)
        if self.probe_error:
            raise self.probe_error
        if full_name not in self.repos:
            raise UnknownObjectException(404, {"message": "Not Found"}, {})
        return type("Repo", (), {"full_name": full_name})()

    def get_organization(self, login):
        return FakeOrganization(self, login)


class FakeGit:
    """In-memory git with the same interface as GitClient.

    Commits are snapshots of the working tree files; .git is created on
    init so path-based checks behave like the real thing.
    """

    def __init__(self, path, branch="", push_error=None):
        self.path = Path(path)
        self.branch = branch
        self.push_error = push_error
        self.commits = []
        self.pushes = []
        self.remote_urls = {}
        self.calls = []
        self._committed = {}
        self._staged = {}

    def _snapshot(self):
        files = {}
        for item in self.path.rglob("*"):
            if ".git" in item.relative_to(self.path).parts or not item.is_file():
                continue
            files[str(item.relative_to(self.path))] = item.read_bytes()
        return files

    def _require_repo(self, command):
        if not (self.path / ".git").is_dir():
            raise GitError(["git", command], 128, "fatal: not a git repository")

    def init(self):
        self.calls.append("init")
        (self.path / ".git").mkdir()

    def add_all(self):
        self.calls.append("add")
        self._require_repo("add")
        self._staged = self._snapshot()

    def has_staged_changes(self):
        return self._staged != self._committed

    def has_changes(self):
        return self._snapshot() != self._committed

    def commit(self, message):
        self.calls.append("commit")
        self.commits.append(message)
        self._committed = dict(self._staged)

    def remotes(self):
        return list(self.remote_urls)

    def get_remote_url(self, name):
        return self.remote_urls[name]

    def add_remote(self, name, url):
        self.calls.append("remote add")
        self.remote_urls[name] = url

    def set_remote_url(self, name, url):
        self.calls.append("remote set-url")
        self.remote_urls[name] = url

    def remote_head_branch(self, remote="origin"):
        return None

    def current_branch(self):
        return self.branch

    def checkout_new_branch(self, name):
        self.calls.append(f"checkout -b {name}")
        self.branch = name

    def push(self, remote, branch):
        self.calls.append(f"push {remote} {branch}")
        if self.push_error:
            raise PushFailedError(["git", "push", "-u", remote, branch], 1, self.push_error)
        self.pushes.append((remote, branch))


@pytest.fixture
def fake_github():
    return FakeGithub()


@pytest.fixture
def make_fake_git():
    return FakeGit


@pytest.fixture
def scripted_prompter():
    return ScriptedPrompter


@pytest.fixture
def fake_resp():
    return FakeResp


@pytest.fixture(autouse=True)
def _restore_logger_level():
    # main() sets the package logger's level; keep it from leaking between tests
    logger = logging.getLogger("github_init")
    level = logger.level
    yield
    logger.setLevel(level)
