#!/usr/bin/env python
"""
Development environment setup for contract.

Installs the package with its dev extra, reports the dev tools and runs the
repository guards. Uses logging (no print) and exits non-zero on failure.
"""

from __future__ import annotations

import logging
import pathlib
import subprocess
import sys
from collections.abc import Sequence

from contract.logging import get_logger, setup_logging

DEV_TOOLS = ("black", "ruff", "mypy", "pytest")


def _in_virtual_env() -> bool:
    return sys.base_prefix != sys.prefix


def _run(cmd: Sequence[str], cwd: pathlib.Path | None = None) -> int:
    proc = subprocess.run(cmd, capture_output=True, check=False, cwd=cwd)
    return proc.returncode


def check_tools(log: logging.Logger, tools: Sequence[str] = DEV_TOOLS) -> list[str]:
    """Log each tool's availability and return the missing ones."""
    missing: list[str] = []
    for tool in tools:
        if _run([tool, "--version"]) == 0:
            log.info("[ok] %s is installed", tool)
        else:
            log.warning("[warn] %s not found or not working properly", tool)
            missing.append(tool)
    return missing


def main() -> None:
    setup_logging()
    log = get_logger("setup_dev")

    project_root = pathlib.Path(__file__).resolve().parent.parent
    log.info("Setting up development environment for contract")
    log.info("Project root: %s", project_root)

    if not _in_virtual_env():
        log.warning("Not running in a virtual environment.")
        ans = input("Continue anyway? [y/N]: ")
        if ans.strip().lower() != "y":
            log.error("Aborting.")
            sys.exit(1)

    log.info("=== Installing package with development extras ===")
    subprocess.check_call(
        [sys.executable, "-m", "pip", "install", "-e", f"{project_root}[dev]"]
    )

    log.info("=== Verifying common dev tools ===")
    check_tools(log)

    log.info("=== Running repository guards ===")
    rc = _run([sys.executable, "-m", "tools.guard"], cwd=project_root)
    if rc != 0:
        log.error("Repository guards failed (exit code %d)", rc)
        sys.exit(rc)
    log.info("Repository guards passed")


if __name__ == "__main__":
    main()
