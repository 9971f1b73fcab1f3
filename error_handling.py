#!/usr/bin/env python3
"""
Error Handling for github-init

This module defines the exception hierarchy raised by the provisioning steps
and the helpers used to report them.

Features:
- One exception type per fatal condition (missing tool, bad token, bad name,
  missing path, GitHub API failure, git failure, push failure)
- Structured error context for debug logging
- Repository slug validation
"""

import logging
import re
import time
import traceback
from dataclasses import dataclass
from typing import Any, Dict, Optional
from enum import Enum


class ErrorSeverity(Enum):
    """Error severity levels."""
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Error categories for better handling."""
    DEPENDENCY = "dependency"
    AUTH = "auth"
    VALIDATION = "validation"
    FILESYSTEM = "filesystem"
    API = "api"
    GIT = "git"


class RemoteFailure(Enum):
    """Ways the GitHub repository probe/create can fail."""
    PROBE_FAILED = "probe_failed"
    CREATE_FAILED = "create_failed"
    VALIDATION_FAILED = "validation_failed"


@dataclass
class ErrorContext:
    """Context information for error handling."""
    operation: str
    severity: ErrorSeverity = ErrorSeverity.HIGH
    category: ErrorCategory = ErrorCategory.VALIDATION
    metadata: Dict[str, Any] = None

    def __post_init__(self):
        if self.metadata is None:
            self.metadata = {}


class GitHubInitError(Exception):
    """Base exception for github-init with context."""

    category = ErrorCategory.VALIDATION

    def __init__(self, message: str, context: ErrorContext = None, cause: Exception = None):
        super().__init__(message)
        if context is None:
            context = ErrorContext(operation=self.category.value)
        context.category = self.category
        self.context = context
        self.cause = cause
        self.timestamp = time.time()

    @property
    def reason(self) -> str:
        """Short name of the failure, e.g. ``InvalidName``."""
        return self.__class__.__name__.replace("Error", "")

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging/reporting."""
        return {
            "message": str(self),
            "type": self.__class__.__name__,
            "timestamp": self.timestamp,
            "context": {
                "operation": self.context.operation,
                "severity": self.context.severity.value,
                "category": self.context.category.value,
                "metadata": self.context.metadata
            },
            "cause": str(self.cause) if self.cause else None,
            "traceback": traceback.format_exc()
        }


class MissingDependencyError(GitHubInitError):
    """A required external tool is not installed."""

    category = ErrorCategory.DEPENDENCY

    def __init__(self, tool: str):
        context = ErrorContext(
            operation="preflight",
            severity=ErrorSeverity.CRITICAL,
            metadata={"tool": tool}
        )
        super().__init__(f"{tool} is not installed. Please install {tool} and try again.", context)
        self.tool = tool


class InvalidTokenError(GitHubInitError):
    """The GitHub token was rejected by the API."""

    category = ErrorCategory.AUTH

    def __init__(self, status: Optional[int] = None, cause: Exception = None):
        context = ErrorContext(operation="validate_token", metadata={"status": status})
        super().__init__("Invalid GitHub token. Please check and try again.", context, cause)
        self.status = status


class InvalidNameError(GitHubInitError):
    """Repository name is not a valid slug."""

    category = ErrorCategory.VALIDATION

    def __init__(self, name: str):
        context = ErrorContext(operation="resolve_project_name", metadata={"name": name})
        super().__init__(
            f"Invalid repository name '{name}'. Ensure it's all lowercase, uses single dashes "
            "instead of spaces or special characters, and does not contain multiple consecutive dashes.",
            context
        )
        self.name = name


class PathNotFoundError(GitHubInitError):
    """Target directory does not exist."""

    category = ErrorCategory.FILESYSTEM

    def __init__(self, path: str):
        context = ErrorContext(operation="prepare_directory", metadata={"path": str(path)})
        super().__init__(f"Target directory '{path}' does not exist.", context)
        self.path = path


class RemoteRepoError(GitHubInitError):
    """GitHub returned an unexpected status while probing or creating a repository."""

    category = ErrorCategory.API

    def __init__(self, kind: RemoteFailure, status: Optional[int] = None, body: Any = None,
                 cause: Exception = None):
        if kind is RemoteFailure.PROBE_FAILED:
            message = f"Failed to check repository status. HTTP Status: {status}"
        elif kind is RemoteFailure.VALIDATION_FAILED:
            message = "Repository already exists or validation failed."
        else:
            message = f"Failed to create repository. HTTP Status: {status}"
        if body:
            message = f"{message}\n{body}"
        context = ErrorContext(
            operation="ensure_remote_repo",
            metadata={"kind": kind.value, "status": status}
        )
        super().__init__(message, context, cause)
        self.kind = kind
        self.status = status
        self.body = body

    @property
    def reason(self) -> str:
        return "".join(part.title() for part in self.kind.value.split("_"))


class GitError(GitHubInitError):
    """A git subprocess exited with a non-zero status."""

    category = ErrorCategory.GIT

    def __init__(self, command, returncode: int = None, stderr: str = "", cause: Exception = None):
        command_text = " ".join(command) if isinstance(command, (list, tuple)) else str(command)
        message = f"Git command failed: {command_text}"
        if stderr:
            message = f"{message}\n{stderr.strip()}"
        context = ErrorContext(
            operation=command_text,
            metadata={"returncode": returncode}
        )
        super().__init__(message, context, cause)
        self.command = command
        self.returncode = returncode
        self.stderr = stderr


class PushFailedError(GitError):
    """Pushing the branch to origin failed."""

    @property
    def reason(self) -> str:
        return "PushFailed"


def log_error(error: GitHubInitError, logger: logging.Logger = None):
    """Log error with its context; full details only at debug level."""
    logger = logger or logging.getLogger(__name__)

    log_level = {
        ErrorSeverity.HIGH: logging.ERROR,
        ErrorSeverity.CRITICAL: logging.CRITICAL
    }.get(error.context.severity, logging.ERROR)

    logger.log(log_level, f"❌ [{error.context.category.value.upper()}] {error}")
    logger.debug(f"Error context: {error.to_dict()}")


SLUG_PATTERN = re.compile(r'^[a-z0-9]+(-[a-z0-9]+)*$')


def validate_repo_name(name: str) -> bool:
    """Validate repository name against the lowercase slug rules."""
    if not name or not isinstance(name, str):
        return False
    return bool(SLUG_PATTERN.fullmatch(name))
