#!/usr/bin/env python3
"""
github-init: create a GitHub repository and push the current project to it

This tool provisions everything needed to publish a local directory:

1. A public repository under a GitHub organization (skipped if it exists)
2. A local git repository (skipped if already initialized)
3. A default .gitignore (skipped if present)
4. An initial commit with message 'init' (skipped if nothing changed)
5. The 'origin' remote, added or corrected to point at the new repository
6. A push of 'main' (or an existing 'main'/'master') with upstream tracking

Every step checks the current state first, so running the tool again on an
already published project only pushes.

Usage:
    github-init [-o ORG] [-r REPO] [-v] [projectName]

Requirements:
    - git installed and available in PATH
    - GitHub Personal Access Token with repo scope (prompted once, stored in ~/.github-initrc)
    - Python 3.9+
"""

import os
import sys
import getpass
import logging
import argparse
import subprocess
import shutil
import re
from pathlib import Path
from typing import List, Optional, Callable
from dataclasses import dataclass, field
from enum import Enum

import requests
from dotenv import dotenv_values
from github import Auth, Github, GithubException, UnknownObjectException
from tqdm import tqdm

from error_handling import (
    GitHubInitError,
    MissingDependencyError,
    InvalidTokenError,
    InvalidNameError,
    PathNotFoundError,
    RemoteRepoError,
    RemoteFailure,
    GitError,
    PushFailedError,
    log_error,
    validate_repo_name,
)


LOGGER_NAME = "github_init"

GITHUB_API = "https://api.github.com"
DEFAULT_ORG = "fs-tools"
SETTINGS_ENV_VAR = "GITHUB_INIT_SETTINGS"
SETTINGS_FILENAME = ".github-initrc"

DEFAULT_GITIGNORE = "node_modules\n.yarn.*\n"
INITIAL_COMMIT_MESSAGE = "init"
REMOTE_NAME = "origin"
DEFAULT_BRANCH = "main"
REUSABLE_BRANCHES = ("main", "master")
REQUIRED_TOOLS = ("git",)


class RemoteRepoState(Enum):
    """Whether the repository exists on GitHub."""
    ABSENT = "absent"
    EXISTS = "exists"


class RemoteRepoResult(Enum):
    """Outcome of ensure_remote_repo."""
    CREATED = "created"
    ALREADY_EXISTS = "already_exists"


class StepOutcome(Enum):
    """Outcome of an idempotent local step."""
    PERFORMED = "performed"
    SKIPPED = "skipped"


class RemoteLinkAction(Enum):
    """What happened to the 'origin' remote."""
    ADDED = "added"
    UPDATED = "updated"
    UNCHANGED = "unchanged"


class PublishState(Enum):
    """Terminal states of a publish run."""
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    FAILED = "failed"


@dataclass
class Settings:
    """Persisted settings, stored in the settings file."""
    organization: str = DEFAULT_ORG
    target_path: str = field(default_factory=os.getcwd)
    verbose: bool = False
    token: str = ""


@dataclass
class ProvisioningRequest:
    """Everything needed to provision one repository."""
    organization: str
    project_name: str
    target_path: Path
    token: str

    @property
    def html_url(self) -> str:
        return f"https://github.com/{self.organization}/{self.project_name}"

    @property
    def remote_url(self) -> str:
        return f"{self.html_url}.git"


@dataclass
class LocalRepoState:
    """Snapshot of the local directory, probed fresh on every run."""
    git_initialized: bool = False
    gitignore_present: bool = False
    has_uncommitted_changes: bool = True
    remote_configured: bool = False
    remote_url_matches: bool = False


@dataclass
class PublishConfig:
    """Run-time configuration for the orchestrator."""
    organization: str
    target_path: Path
    token: str
    repo_name: Optional[str] = None
    project_name: Optional[str] = None
    cwd: Path = field(default_factory=Path.cwd)


@dataclass
class PublishResult:
    """Result of PublishOrchestrator.run."""
    state: PublishState
    project_name: Optional[str] = None
    remote_result: Optional[RemoteRepoResult] = None
    branch: Optional[str] = None
    error: Optional[GitHubInitError] = None

    @property
    def reason(self) -> Optional[str]:
        return self.error.reason if self.error else None

    @property
    def succeeded(self) -> bool:
        return self.state is not PublishState.FAILED


# -----------------
# Repository naming
# -----------------
def sanitize_repo_name(raw_name: str) -> str:
    """Turn arbitrary text into a lowercase, dash-separated repository slug.

    Never fails; the result may be empty and must be checked with
    validate_repo_name before use.
    """
    name = raw_name.lower()
    name = re.sub(r"[^a-z0-9]", "-", name)
    name = re.sub(r"-+", "-", name)
    return name.strip("-")


def resolve_project_name(repo_name: Optional[str], project_name: Optional[str],
                         cwd: Optional[Path] = None, logger: logging.Logger = None) -> str:
    """Pick the repository name: --repo flag, then positional argument, then cwd name."""
    logger = logger or logging.getLogger(LOGGER_NAME)
    if repo_name:
        name = sanitize_repo_name(repo_name)
        logger.debug(f"Repository name provided via option: {name}")
    elif project_name:
        name = sanitize_repo_name(project_name)
        logger.debug(f"Repository name provided as positional argument: {name}")
    else:
        cwd = Path(cwd) if cwd else Path.cwd()
        name = sanitize_repo_name(cwd.name)
        logger.debug(f"No repository name provided. Using current directory name: {name}")

    if not validate_repo_name(name):
        raise InvalidNameError(name)
    return name


# -------
# Prompts
# -------
class ConsolePrompter:
    """Interactive prompts on the controlling terminal."""

    def secret(self, message: str) -> str:
        try:
            return getpass.getpass(message)
        except EOFError:
            return ""

    def ask(self, message: str) -> str:
        try:
            return input(message)
        except EOFError:
            return ""


# ----------------
# Settings & token
# ----------------
def default_settings_path() -> Path:
    """Settings file location; GITHUB_INIT_SETTINGS overrides ~/.github-initrc."""
    override = os.getenv(SETTINGS_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / SETTINGS_FILENAME


def _quote(value) -> str:
    text = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{text}"'


class CredentialStore:
    """Loads and saves the settings file and supplies a validated GitHub token."""

    def __init__(self, settings_path: Optional[Path] = None, prompter=None,
                 api_url: str = GITHUB_API, logger: logging.Logger = None):
        self.settings_path = Path(settings_path) if settings_path else default_settings_path()
        self.prompter = prompter or ConsolePrompter()
        self.api_url = api_url.rstrip("/")
        self.logger = logger or logging.getLogger(LOGGER_NAME)
        self.settings: Optional[Settings] = None

    def load(self) -> Settings:
        """Read the settings file, creating it with defaults when missing."""
        if not self.settings_path.exists():
            self.logger.info("Initializing configuration file with default settings...")
            self.settings = Settings()
            self.save(self.settings)
            return self.settings

        values = dotenv_values(self.settings_path, interpolate=False)
        defaults = Settings()
        self.settings = Settings(
            organization=values.get("ORG_NAME") or defaults.organization,
            target_path=values.get("TARGET_PATH") or defaults.target_path,
            verbose=(values.get("VERBOSE") or "false").strip().lower() == "true",
            token=values.get("GITHUB_TOKEN") or "",
        )
        self.logger.debug(f"Loaded settings from {self.settings_path}")
        return self.settings

    def save(self, settings: Settings) -> None:
        """Overwrite the settings file with all four values (owner read/write only)."""
        lines = [
            f"ORG_NAME={_quote(settings.organization)}",
            f"TARGET_PATH={_quote(settings.target_path)}",
            f"VERBOSE={_quote('true' if settings.verbose else 'false')}",
            f"GITHUB_TOKEN={_quote(settings.token)}",
        ]
        fd = os.open(self.settings_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write("\n".join(lines) + "\n")
        os.chmod(self.settings_path, 0o600)

    def validate_token(self, token: str) -> None:
        """Check the token against GET /user; anything but 200 is rejected."""
        try:
            resp = requests.get(
                f"{self.api_url}/user",
                headers={
                    "Authorization": f"Bearer {token}",
                    "Accept": "application/vnd.github.v3+json",
                },
                timeout=10,
            )
        except requests.RequestException as e:
            raise InvalidTokenError(cause=e) from e
        if resp.status_code != 200:
            self.logger.debug(f"Token check failed: {resp.status_code} {resp.text}")
            raise InvalidTokenError(resp.status_code)

    def load_or_prompt(self) -> str:
        """Return the stored token, or prompt for one, validate it and persist it."""
        settings = self.settings or self.load()
        if settings.token:
            return settings.token

        self.logger.warning("GitHub token not found.")
        token = self.prompter.secret("Please enter your GitHub Personal Access Token: ").strip()
        self.validate_token(token)

        settings.token = token
        self.save(settings)
        self.logger.info(f"✅ GitHub token saved successfully in {self.settings_path}.")
        return token


# ---------------
# Remote (GitHub)
# ---------------
class RemoteRepoProvisioner:
    """Probes for and creates the repository on GitHub."""

    def __init__(self, token: Optional[str] = None, github: Optional[Github] = None,
                 logger: logging.Logger = None):
        # retry=None: a failed call is reported, never retried
        self.github = github or Github(auth=Auth.Token(token), retry=None)
        self.logger = logger or logging.getLogger(LOGGER_NAME)

    def probe(self, org: str, name: str) -> RemoteRepoState:
        """GET /repos/{org}/{name}: 200 means it exists, 404 means absent."""
        try:
            self.github.get_repo(f"{org}/{name}")
            return RemoteRepoState.EXISTS
        except UnknownObjectException:
            return RemoteRepoState.ABSENT
        except GithubException as e:
            if e.status == 404:
                return RemoteRepoState.ABSENT
            raise RemoteRepoError(RemoteFailure.PROBE_FAILED, e.status, e.data, cause=e) from e
        except requests.RequestException as e:
            raise RemoteRepoError(RemoteFailure.PROBE_FAILED, None, str(e), cause=e) from e

    def ensure_remote_repo(self, org: str, name: str) -> RemoteRepoResult:
        """Create a public repository under org unless it already exists."""
        self.logger.debug("Creating GitHub repository...")
        if self.probe(org, name) is RemoteRepoState.EXISTS:
            self.logger.warning(f"Repository https://github.com/{org}/{name} already exists.")
            return RemoteRepoResult.ALREADY_EXISTS

        try:
            organization = self.github.get_organization(org)
            organization.create_repo(name=name, private=False)
        except GithubException as e:
            if e.status == 422:
                errors = e.data.get("errors") if isinstance(e.data, dict) else e.data
                raise RemoteRepoError(RemoteFailure.VALIDATION_FAILED, e.status, errors, cause=e) from e
            raise RemoteRepoError(RemoteFailure.CREATE_FAILED, e.status, e.data, cause=e) from e
        except requests.RequestException as e:
            raise RemoteRepoError(RemoteFailure.CREATE_FAILED, None, str(e), cause=e) from e

        self.logger.info(f"✅ GitHub repository created at https://github.com/{org}/{name}")
        return RemoteRepoResult.CREATED


# ---
# Git
# ---
class GitClient:
    """Runs git commands inside one working directory."""

    def __init__(self, cwd, logger: logging.Logger = None):
        self.cwd = Path(cwd)
        self.logger = logger or logging.getLogger(LOGGER_NAME)

    def run_git_command(self, args: List[str], check: bool = True) -> subprocess.CompletedProcess:
        """Run a git command and return the result."""
        command = ["git", *args]
        try:
            result = subprocess.run(
                command,
                cwd=str(self.cwd),
                capture_output=True,
                text=True,
                check=check
            )
        except subprocess.CalledProcessError as e:
            self.logger.debug(f"Git command failed: {' '.join(command)}: {e.stderr}")
            raise GitError(command, e.returncode, e.stderr, cause=e) from e
        if result.stdout and result.stdout.strip():
            self.logger.debug(result.stdout.strip())
        return result

    def init(self) -> None:
        self.run_git_command(["init"])

    def add_all(self) -> None:
        self.run_git_command(["add", "."])

    def has_staged_changes(self) -> bool:
        """True when the index differs from HEAD (git diff --cached --quiet exits 1)."""
        result = self.run_git_command(["diff", "--cached", "--quiet"], check=False)
        if result.returncode not in (0, 1):
            raise GitError(["git", "diff", "--cached", "--quiet"], result.returncode, result.stderr)
        return result.returncode == 1

    def has_changes(self) -> bool:
        """True when the working tree has anything to commit (read only)."""
        return bool(self.run_git_command(["status", "--porcelain"]).stdout.strip())

    def commit(self, message: str) -> None:
        self.run_git_command(["commit", "-m", message])

    def remotes(self) -> List[str]:
        return self.run_git_command(["remote"]).stdout.split()

    def get_remote_url(self, name: str) -> str:
        return self.run_git_command(["remote", "get-url", name]).stdout.strip()

    def add_remote(self, name: str, url: str) -> None:
        self.run_git_command(["remote", "add", name, url])

    def set_remote_url(self, name: str, url: str) -> None:
        self.run_git_command(["remote", "set-url", name, url])

    def remote_head_branch(self, remote: str = REMOTE_NAME) -> Optional[str]:
        """Default branch recorded for the remote, if git knows it."""
        result = self.run_git_command(["symbolic-ref", f"refs/remotes/{remote}/HEAD"], check=False)
        if result.returncode != 0:
            return None
        return result.stdout.strip().replace(f"refs/remotes/{remote}/", "", 1) or None

    def current_branch(self) -> str:
        return self.run_git_command(["branch", "--show-current"]).stdout.strip()

    def checkout_new_branch(self, name: str) -> None:
        self.run_git_command(["checkout", "-b", name])

    def push(self, remote: str, branch: str) -> None:
        command = ["git", "push", "-u", remote, branch]
        result = self.run_git_command(command[1:], check=False)
        if result.returncode != 0:
            raise PushFailedError(command, result.returncode, result.stderr or result.stdout)


# -----
# Local
# -----
class LocalRepoProvisioner:
    """Idempotent local steps: git init, .gitignore, initial commit."""

    def __init__(self, path, git: Optional[GitClient] = None, logger: logging.Logger = None):
        self.path = Path(path)
        self.logger = logger or logging.getLogger(LOGGER_NAME)
        self.git = git or GitClient(self.path, self.logger)

    @property
    def git_initialized(self) -> bool:
        return (self.path / ".git").is_dir()

    @property
    def gitignore_path(self) -> Path:
        return self.path / ".gitignore"

    def probe(self, remote_url: str) -> LocalRepoState:
        """Inspect the directory without changing anything."""
        state = LocalRepoState(
            git_initialized=self.git_initialized,
            gitignore_present=self.gitignore_path.exists(),
        )
        if not state.git_initialized:
            return state

        state.has_uncommitted_changes = not state.gitignore_present or self.git.has_changes()
        state.remote_configured = REMOTE_NAME in self.git.remotes()
        if state.remote_configured:
            state.remote_url_matches = self.git.get_remote_url(REMOTE_NAME) == remote_url
        return state

    def ensure_git_initialized(self) -> StepOutcome:
        if self.git_initialized:
            self.logger.debug("Git repository already initialized. Skipping git init.")
            return StepOutcome.SKIPPED
        self.logger.debug("Initializing Git repository...")
        self.git.init()
        self.logger.info("✅ Git repository initialized.")
        return StepOutcome.PERFORMED

    def ensure_gitignore(self) -> StepOutcome:
        if self.gitignore_path.exists():
            self.logger.info("Notice: .gitignore already exists. Skipping creation.")
            return StepOutcome.SKIPPED
        self.logger.info("Creating .gitignore file...")
        self.gitignore_path.write_text(DEFAULT_GITIGNORE, encoding="utf-8")
        self.logger.info("✅ .gitignore created with default contents.")
        return StepOutcome.PERFORMED

    def ensure_initial_commit(self) -> StepOutcome:
        self.logger.debug("Staging files for initial commit...")
        self.git.add_all()
        if not self.git.has_staged_changes():
            self.logger.info("Notice: No changes to commit.")
            return StepOutcome.SKIPPED
        self.logger.debug("Creating initial commit...")
        self.git.commit(INITIAL_COMMIT_MESSAGE)
        self.logger.info(f"✅ Initial commit created with message '{INITIAL_COMMIT_MESSAGE}'.")
        return StepOutcome.PERFORMED


# -------------
# Orchestration
# -------------
class PublishOrchestrator:
    """Runs the whole publish sequence for one directory.

    The run stops at the first failure. Nothing done before a failure is
    rolled back: a push error leaves the GitHub repository, the local commit
    and the remote link in place.
    """

    def __init__(self, config: PublishConfig, prompter=None,
                 remote: Optional[RemoteRepoProvisioner] = None,
                 git_factory: Optional[Callable[[Path], GitClient]] = None,
                 logger: logging.Logger = None):
        self.config = config
        self.prompter = prompter or ConsolePrompter()
        self.logger = logger or logging.getLogger(LOGGER_NAME)
        self._remote = remote
        self.git_factory = git_factory or (lambda path: GitClient(path, self.logger))

    @property
    def remote(self) -> RemoteRepoProvisioner:
        if self._remote is None:
            self._remote = RemoteRepoProvisioner(self.config.token, logger=self.logger)
        return self._remote

    def prepare(self) -> ProvisioningRequest:
        """Resolve the project name and check the target directory."""
        name = resolve_project_name(
            self.config.repo_name, self.config.project_name, self.config.cwd, self.logger
        )
        target = Path(self.config.target_path).expanduser()
        self.logger.debug(f"Navigating to target directory: {target}")
        if not target.is_dir():
            raise PathNotFoundError(str(target))
        self.logger.info(f"Repository Name: {name}")
        return ProvisioningRequest(
            organization=self.config.organization,
            project_name=name,
            target_path=target.resolve(),
            token=self.config.token,
        )

    def preview(self, request: ProvisioningRequest, state: LocalRepoState) -> List[str]:
        """Describe every pending action; changes nothing."""
        lines = [
            f"- GitHub Repository: {request.html_url}",
            f"- Local Directory: {request.target_path}",
            "- Local Git Repository: "
            + ("Already initialized." if state.git_initialized else "Will be initialized."),
            "- .gitignore File: "
            + ("Already present, will be skipped." if state.gitignore_present else "Will be created."),
            "- Initial Commit: "
            + (f"Will be made with message '{INITIAL_COMMIT_MESSAGE}'." if state.has_uncommitted_changes
               else "Nothing to commit, will be skipped."),
        ]
        if state.remote_url_matches:
            lines.append(f"- Remote Origin: Already set to {request.remote_url}")
        elif state.remote_configured:
            lines.append(f"- Remote Origin: Will be updated to {request.remote_url}")
        else:
            lines.append(f"- Remote Origin: Will be set to {request.remote_url}")

        self.logger.info("========== Preview of Actions ==========")
        for line in lines:
            self.logger.info(line)
        self.logger.info("=========================================")
        return lines

    def confirm(self) -> bool:
        choice = self.prompter.ask("Do you want to proceed? [y/N]: ").strip()
        if choice in ("y", "Y"):
            self.logger.info("Proceeding...")
            return True
        self.logger.info("Operation cancelled.")
        return False

    def reconcile_remote(self, git: GitClient, remote_url: str) -> RemoteLinkAction:
        """Point 'origin' at remote_url, adding it if missing."""
        if REMOTE_NAME in git.remotes():
            current_url = git.get_remote_url(REMOTE_NAME)
            if current_url == remote_url:
                self.logger.info(f"Notice: Remote '{REMOTE_NAME}' already set to {remote_url}.")
                return RemoteLinkAction.UNCHANGED
            self.logger.info(
                f"Notice: Remote '{REMOTE_NAME}' exists with URL {current_url}. Updating to {remote_url}."
            )
            git.set_remote_url(REMOTE_NAME, remote_url)
            self.logger.info(f"✅ Remote '{REMOTE_NAME}' updated.")
            return RemoteLinkAction.UPDATED

        self.logger.debug(f"Adding remote '{REMOTE_NAME}'...")
        git.add_remote(REMOTE_NAME, remote_url)
        self.logger.info(f"✅ Remote '{REMOTE_NAME}' added.")
        return RemoteLinkAction.ADDED

    def select_branch(self, git: GitClient) -> str:
        """Reuse main/master, otherwise create and switch to main."""
        current = git.current_branch()
        if current in REUSABLE_BRANCHES:
            return current
        git.checkout_new_branch(DEFAULT_BRANCH)
        return DEFAULT_BRANCH

    def run(self) -> PublishResult:
        """Execute the publish sequence and report its terminal state."""
        self.logger.info("Starting GitHub Repository Initialization...")
        request = None
        result = PublishResult(state=PublishState.FAILED)
        try:
            request = self.prepare()
            result.project_name = request.project_name
            git = self.git_factory(request.target_path)
            local = LocalRepoProvisioner(request.target_path, git, self.logger)

            self.preview(request, local.probe(request.remote_url))
            if not self.confirm():
                result.state = PublishState.CANCELLED
                return result

            with tqdm(total=5, desc=f"🚀 Publishing {request.project_name}", unit="step") as pbar:
                result.remote_result = self.remote.ensure_remote_repo(
                    request.organization, request.project_name
                )
                pbar.update(1)

                local.ensure_git_initialized()
                local.ensure_gitignore()
                local.ensure_initial_commit()
                pbar.update(1)

                self.reconcile_remote(git, request.remote_url)
                pbar.update(1)

                default_branch = git.remote_head_branch(REMOTE_NAME)
                if default_branch:
                    self.logger.debug(f"Remote default branch: {default_branch}")
                result.branch = self.select_branch(git)
                pbar.update(1)

                self.logger.debug("Pushing local repository to GitHub...")
                git.push(REMOTE_NAME, result.branch)
                pbar.update(1)
        except GitHubInitError as e:
            log_error(e, self.logger)
            result.error = e
            return result

        self.logger.info(f"✅ Repository pushed to GitHub successfully on branch '{result.branch}'.")
        self.logger.info("🎉 All operations completed successfully.")
        result.state = PublishState.COMPLETED
        return result


# ---
# CLI
# ---
class UsageArgumentParser(argparse.ArgumentParser):
    """ArgumentParser whose usage errors exit with status 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"Error: {message}\n")


def _non_empty(value: str) -> str:
    if not value:
        raise argparse.ArgumentTypeError("requires a non-empty option argument")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = UsageArgumentParser(
        prog="github-init",
        description="Create a GitHub repository, initialize git locally and push.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  github-init
  github-init -o fs-random -r api-interceptor
  github-init --org fs-random --repo api-interceptor --verbose
  github-init -r api-interceptor
""",
    )
    parser.add_argument('project_name', nargs='?', metavar='projectName',
                        help='Repository name (default: current directory name)')
    parser.add_argument('-o', '--org', type=_non_empty, help='GitHub organization (overrides config)')
    parser.add_argument('-r', '--repo', type=_non_empty, help='GitHub repository name')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose output')
    return parser


def setup_logging(verbose: bool = False) -> logging.Logger:
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger


def check_dependencies(tools=REQUIRED_TOOLS) -> None:
    """Fail before doing anything if a required binary is missing."""
    for tool in tools:
        if shutil.which(tool) is None:
            raise MissingDependencyError(tool)


def main(argv: Optional[List[str]] = None, prompter=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    logger = setup_logging(args.verbose)
    prompter = prompter or ConsolePrompter()

    try:
        check_dependencies()

        store = CredentialStore(prompter=prompter, logger=logger)
        settings = store.load()
        if settings.verbose:
            logger.setLevel(logging.DEBUG)

        cwd = Path.cwd()
        # validate before the token check so a bad name makes no network call
        resolve_project_name(args.repo, args.project_name, cwd, logger)
        token = store.load_or_prompt()

        config = PublishConfig(
            organization=args.org or settings.organization,
            target_path=Path(settings.target_path),
            token=token,
            repo_name=args.repo,
            project_name=args.project_name,
            cwd=cwd,
        )
        result = PublishOrchestrator(config, prompter=prompter, logger=logger).run()
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return 1
    except GitHubInitError as e:
        log_error(e, logger)
        return 1

    return 0 if result.succeeded else 1


if __name__ == "__main__":
    sys.exit(main())
