"""Thin wrapper around the local git executable."""

import subprocess

import structlog

from github_release_manager.exceptions import GitCommandError

logger = structlog.get_logger(__name__)


def run_git(*args: str) -> str:
    """Run a git command in the current directory and return its stdout.

    Raises GitCommandError when git exits non-zero or is not installed.
    """
    cmd = ["git", *args]
    command = " ".join(cmd)
    logger.debug("Running git command", command=command)
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, check=True)
    except subprocess.CalledProcessError as exc:
        reason = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
        logger.error("Git command failed", command=command, returncode=exc.returncode, stderr=exc.stderr)
        raise GitCommandError(command, reason) from exc
    except FileNotFoundError as exc:
        logger.error("Git executable not found", command=command)
        raise GitCommandError(command, "git executable not found") from exc
    return result.stdout


def push_to_remote() -> None:
    """Push local commits, then tags, to the default remote."""
    run_git("push")
    run_git("push", "--tags")
    logger.info("Pushed commits and tags to remote")
