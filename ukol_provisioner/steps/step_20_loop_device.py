from __future__ import annotations

import logging
from typing import Iterator

from ..context import ProvisionContext
from ..lib.loopdev import attach_loop_device, create_backing_file
from ..pipeline import Action

logger = logging.getLogger(__name__)


def _attach(ctx: ProvisionContext) -> None:
    ctx.loop_device = attach_loop_device(ctx.paths.backing_file, dry_run=ctx.dry_run)


class LoopDeviceStep:
    step_id = "20_loop_device"

    def actions(self, ctx: ProvisionContext) -> Iterator[Action]:
        path = ctx.paths.backing_file
        size = ctx.paths.backing_file_mib

        yield Action(
            description=f"Creating file {path} of size {size}M",
            success=f"Created file {path} of size {size}M",
            failure=f"Failed to create file {path} of size {size}M",
            run=lambda c: create_backing_file(path, size, dry_run=c.dry_run),
        )

        yield Action(
            description="Creating loop device at first unused device",
            success=lambda c: f"Created loop device at {c.loop_device}",
            failure=f"Failed to create loop device for {path}",
            run=_attach,
        )

        logger.info("Loop device %s backs %s", ctx.loop_device, path)
