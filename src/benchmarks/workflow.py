"""Workflow directory management for benchmark runs.

This module provides utilities for creating and managing run directories
with consistent naming and structure.
"""

from __future__ import annotations

import json
import re
import subprocess
from pathlib import Path
from typing import Any

__all__ = [
    "next_run_dir",
    "write_run_files",
    "try_get_git_commit",
]


def next_run_dir(workflow_dir: Path) -> Path:
    """Create the next run directory with zero-padded naming.

    Creates directories:
    - workflow_dir/run_XXXX/
    - workflow_dir/run_XXXX/artifacts/

    Naming convention: run_0000, run_0001, run_0002, ...
    Policy: next index after the maximum existing index.

    Args:
        workflow_dir: Parent directory for all runs.

    Returns:
        Path to the newly created run directory.

    Example:
        >>> run_dir = next_run_dir(Path("workflow"))
        >>> run_dir
        PosixPath('workflow/run_0000')
    """
    workflow_dir.mkdir(parents=True, exist_ok=True)

    pattern = re.compile(r"^run_(\d{4})$")
    max_index = -1

    for entry in workflow_dir.iterdir():
        if entry.is_dir():
            match = pattern.match(entry.name)
            if match:
                max_index = max(max_index, int(match.group(1)))

    run_dir = workflow_dir / f"run_{max_index + 1:04d}"
    run_dir.mkdir(parents=True, exist_ok=True)
    (run_dir / "artifacts").mkdir(exist_ok=True)

    return run_dir


def write_run_files(
    run_dir: Path,
    *,
    meta: dict[str, Any],
    config: dict[str, Any],
    readme_text: str,
) -> None:
    """Write run metadata files.

    Writes:
    - run_dir/meta.json
    - run_dir/config.json
    - run_dir/README.md

    Args:
        run_dir: Run directory path.
        meta: Metadata dictionary (timestamp, git commit, argv, etc.).
        config: Resolved configuration dictionary.
        readme_text: Human-readable README content.
    """
    with (run_dir / "meta.json").open("w", encoding="utf-8") as f:
        json.dump(meta, f, indent=2, sort_keys=True)

    with (run_dir / "config.json").open("w", encoding="utf-8") as f:
        json.dump(config, f, indent=2, sort_keys=True, default=repr)

    with (run_dir / "README.md").open("w", encoding="utf-8") as f:
        f.write(readme_text)


def try_get_git_commit(cwd: Path | None = None) -> str | None:
    """Return the commit hash of the checkout the benchmarks run from.

    Args:
        cwd: Directory inside the checkout; the process cwd when None.

    Returns:
        The hash, or None when git is missing or cwd is not a checkout.
    """
    try:
        result = subprocess.run(
            ["git", "rev-parse", "HEAD"],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=5,
            check=False,
        )
        if result.returncode == 0:
            return result.stdout.strip()
    except (subprocess.TimeoutExpired, FileNotFoundError, OSError):
        pass
    return None
