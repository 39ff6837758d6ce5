from __future__ import annotations

import logging
from typing import Iterator

from ..context import ProvisionContext
from ..lib.fstab import FstabEntry, append_fstab_entry
from ..lib.storage import create_mount_point, make_filesystem, mount, mount_point_missing
from ..pipeline import Action

logger = logging.getLogger(__name__)


class FilesystemStep:
    step_id = "30_filesystem"

    def actions(self, ctx: ProvisionContext) -> Iterator[Action]:
        device = ctx.require_loop_device()
        fs_type = ctx.paths.fs_type
        mount_point = ctx.paths.mount_point
        fstab = ctx.paths.fstab

        yield Action(
            description=f"Creating filesystem at loop device {device}",
            success=f"Created filesystem at loop device {device}",
            failure=f"Failed to create filesystem at loop device {device}",
            run=lambda c: make_filesystem(device, fs_type, dry_run=c.dry_run),
        )

        if mount_point_missing(mount_point):
            yield Action(
                description=f"Creating mount point directory at {mount_point}",
                success=f"Successfully created mount point directory at {mount_point}",
                failure=f"Failed to create mount point directory at {mount_point}",
                run=lambda c: create_mount_point(mount_point, dry_run=c.dry_run),
            )
        else:
            logger.info("Mount point %s already exists", mount_point)

        entry = FstabEntry(spec=device, mountpoint=mount_point, fstype=fs_type)
        yield Action(
            description=f"Updating {fstab} for automatic mounting of {mount_point}",
            success=f"Updated {fstab} for automatic mounting of {mount_point}",
            failure=f"Failed to update {fstab} for automatic mounting of {mount_point}",
            run=lambda c: append_fstab_entry(fstab, entry, dry_run=c.dry_run),
        )

        yield Action(
            description=f"Mounting filesystem at {device} to {mount_point}",
            success=f"Mounted filesystem at {device} to {mount_point}",
            failure=f"Failed to mount filesystem at {device} to {mount_point}",
            run=lambda c: mount(device, mount_point, fs_type=fs_type, dry_run=c.dry_run),
        )
