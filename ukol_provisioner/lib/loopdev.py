from __future__ import annotations

import logging

from .command import run_cmd

logger = logging.getLogger(__name__)

# Placeholder handed to later steps when losetup is not actually executed.
DRY_RUN_LOOP_DEVICE = "/dev/loopN"


def create_backing_file(path: str, size_mib: int, *, dry_run: bool = False) -> None:
    """Allocate a zero-filled file of exactly size_mib MiB."""

    run_cmd(
        ["dd", "if=/dev/zero", f"of={path}", "bs=1M", f"count={size_mib}"],
        dry_run=dry_run,
    )


def attach_loop_device(path: str, *, dry_run: bool = False) -> str:
    """Attach path to the first free loop device and return the device node."""

    r = run_cmd(["losetup", "--find", "--show", path], dry_run=dry_run)
    if dry_run:
        return DRY_RUN_LOOP_DEVICE

    device = (r.stdout or "").strip()
    if not device:
        raise RuntimeError(f"losetup did not report a loop device for {path}")
    logger.info("Attached %s to %s", path, device)
    return device
