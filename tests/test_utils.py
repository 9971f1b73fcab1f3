import logging
import pytest
from pathlib import Path

from github_init import sanitize_repo_name, resolve_project_name
from error_handling import (
    InvalidNameError, MissingDependencyError, PathNotFoundError, log_error, validate_repo_name,
)


class TestSanitizeRepoName:
    """Test repository name sanitization."""

    def test_basic_sanitization(self):
        assert sanitize_repo_name("My App") == "my-app"
        assert sanitize_repo_name("API Service") == "api-service"
        assert sanitize_repo_name("My Cool/Repo!!") == "my-cool-repo"

    def test_special_characters(self):
        # dots and underscores are not kept, unlike GitHub's own rules
        assert sanitize_repo_name("app@v2.0") == "app-v2-0"
        assert sanitize_repo_name("lib/utils.js") == "lib-utils-js"
        assert sanitize_repo_name("snake_case_name") == "snake-case-name"
        assert sanitize_repo_name("café") == "caf"

    def test_edge_cases(self):
        assert sanitize_repo_name("") == ""
        assert sanitize_repo_name("---") == ""
        assert sanitize_repo_name("!!!") == ""
        assert sanitize_repo_name("   ") == ""
        assert sanitize_repo_name("a") == "a"

    def test_multiple_hyphens(self):
        assert sanitize_repo_name("app--service") == "app-service"
        assert sanitize_repo_name("frontend---backend") == "frontend-backend"
        assert sanitize_repo_name("--leading and trailing--") == "leading-and-trailing"

    @pytest.mark.parametrize("raw", [
        "My Cool/Repo!!", "---", "", "a--b", "  Spaces  ", "UPPER_case.9", "-x-", "日本語 repo",
    ])
    def test_idempotent(self, raw):
        once = sanitize_repo_name(raw)
        assert sanitize_repo_name(once) == once


class TestValidateRepoName:

    def test_valid_slugs(self):
        assert validate_repo_name("my-repo")
        assert validate_repo_name("repo1")
        assert validate_repo_name("a-b-c-1")

    def test_invalid_slugs(self):
        assert not validate_repo_name("")
        assert not validate_repo_name(None)
        assert not validate_repo_name("My-Repo")
        assert not validate_repo_name("-repo")
        assert not validate_repo_name("repo-")
        assert not validate_repo_name("my--repo")
        assert not validate_repo_name("my_repo")
        assert not validate_repo_name("repo\n")

    def test_sanitized_empty_string_is_rejected(self):
        assert not validate_repo_name(sanitize_repo_name("---"))


class TestResolveProjectName:
    """Name precedence: --repo, then positional, then cwd."""

    def test_repo_flag_wins(self):
        name = resolve_project_name("Flag Name", "Positional", Path("/tmp/Some Dir"))
        assert name == "flag-name"

    def test_positional_beats_cwd(self):
        name = resolve_project_name(None, "Positional Name", Path("/tmp/Some Dir"))
        assert name == "positional-name"

    def test_cwd_fallback(self):
        assert resolve_project_name(None, None, Path("/work/My Project")) == "my-project"

    def test_empty_sources_are_skipped(self):
        assert resolve_project_name("", "", Path("/work/fallback")) == "fallback"

    def test_invalid_name_raises(self):
        with pytest.raises(InvalidNameError) as exc_info:
            resolve_project_name("!!!", None, Path("/work/ok"))
        assert exc_info.value.name == ""
        assert exc_info.value.reason == "InvalidName"


class TestLogError:

    def test_missing_tool_logs_critical(self, caplog):
        with caplog.at_level(logging.DEBUG):
            log_error(MissingDependencyError("git"), logging.getLogger("github_init"))
        assert caplog.records[0].levelno == logging.CRITICAL
        assert "[DEPENDENCY]" in caplog.records[0].getMessage()

    def test_default_severity_logs_error(self, caplog):
        with caplog.at_level(logging.DEBUG):
            log_error(PathNotFoundError("/nope"), logging.getLogger("github_init"))
        assert caplog.records[0].levelno == logging.ERROR
        assert caplog.records[1].levelno == logging.DEBUG
