from __future__ import annotations

import logging
from pathlib import Path

from .command import run_cmd

logger = logging.getLogger(__name__)


def make_filesystem(device: str, fs_type: str = "ext4", *, dry_run: bool = False) -> None:
    run_cmd([f"mkfs.{fs_type}", device], dry_run=dry_run)


def mount_point_missing(path: str) -> bool:
    return not Path(path).is_dir()


def create_mount_point(path: str, *, dry_run: bool = False) -> None:
    if dry_run:
        logger.info("Would create %s", path)
        return
    Path(path).mkdir(parents=True, exist_ok=True)


def mount(device: str, mount_point: str, *, fs_type: str | None = None, dry_run: bool = False) -> None:
    argv = ["mount"]
    if fs_type:
        argv += ["-t", fs_type]
    run_cmd([*argv, device, mount_point], dry_run=dry_run)


def umount(mount_point: str, *, dry_run: bool = False) -> None:
    run_cmd(["umount", mount_point], dry_run=dry_run)


def mount_all(*, dry_run: bool = False) -> None:
    """Mount everything listed in the system mount table."""

    run_cmd(["mount", "-a"], dry_run=dry_run)
