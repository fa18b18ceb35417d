"""Build metadata: the commit hash and the build date of the tool."""

from __future__ import annotations

import logging
import os
import subprocess
from datetime import datetime, timezone

log = logging.getLogger(__name__)

COMMIT_ENV = "WASMKIT_GIT_COMMIT_HASH"
DATE_ENV = "WASMKIT_BUILD_DATE"
UNKNOWN = "unknown"

_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def git_commit_hash() -> str:
    """Return the short commit hash, from the environment or from git.

    Falls back to ``unknown`` when git cannot be run or fails.
    """
    override = os.environ.get(COMMIT_ENV)
    if override is not None:
        return override.strip()
    try:
        proc = subprocess.run(
            ["git", "rev-parse", "--short=11", "HEAD"],
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as exc:
        log.warning("Failed to execute git command: %s", exc)
        return UNKNOWN
    if proc.returncode != 0:
        log.warning("Git command failed with status: %s", proc.returncode)
        return UNKNOWN
    return proc.stdout.strip()


def build_date() -> str:
    """Return the current UTC time as ``YYYY-MM-DDTHH:MM:SSZ``."""
    return datetime.now(timezone.utc).strftime(_DATE_FORMAT)


def version_string(
    name: str,
    version: str,
    commit: str | None = None,
    date: str | None = None,
) -> str:
    """Format ``<name> v<version>[-<commit>][ built <date>]``."""
    commit_part = f"-{commit}" if commit else ""
    date_part = f" built {date}" if date else ""
    return f"{name} v{version}{commit_part}{date_part}"