from __future__ import annotations

import logging

from .command import run_cmd

logger = logging.getLogger(__name__)


def start_service(unit: str, *, dry_run: bool = False) -> None:
    run_cmd(["systemctl", "start", unit], dry_run=dry_run)


def enable_service(unit: str, *, dry_run: bool = False) -> None:
    """Enable unit at boot (writes the wants/ symlinks only)."""

    run_cmd(["systemctl", "enable", unit], dry_run=dry_run)
