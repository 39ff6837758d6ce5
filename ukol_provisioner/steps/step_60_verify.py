from __future__ import annotations

import logging
from typing import Iterator

from ..context import ProvisionContext
from ..lib.pkg import yum_list_repo, yum_repolist
from ..lib.storage import mount_all, umount
from ..pipeline import Action

logger = logging.getLogger(__name__)


def _list_repositories(ctx: ProvisionContext) -> None:
    r = yum_repolist(dry_run=ctx.dry_run)
    ctx.reporter.output(r.stdout)


def _list_repo_packages(ctx: ProvisionContext) -> None:
    r = yum_list_repo(ctx.paths.repo_id, dry_run=ctx.dry_run)
    ctx.reporter.output(r.stdout)


class VerifyStep:
    """Read-only checks, except the umount/mount -a round trip.

    Re-mounting through `mount -a` is the only check that the fstab line
    written earlier is well formed.
    """

    step_id = "60_verify"

    def actions(self, ctx: ProvisionContext) -> Iterator[Action]:
        mount_point = ctx.paths.mount_point
        repo_id = ctx.paths.repo_id

        yield Action(
            description="Listing all available YUM repositories",
            success="Listed YUM repositories successfully",
            failure="Failed to list YUM repositories",
            run=_list_repositories,
        )

        yield Action(
            description=f"Unmounting filesystem at {mount_point}",
            success="Unmounted filesystem successfully",
            failure="Failed to unmount filesystem",
            run=lambda c: umount(mount_point, dry_run=c.dry_run),
        )

        yield Action(
            description=f"Re-mounting all entries from {ctx.paths.fstab}",
            success=f"Re-mounted all entries from {ctx.paths.fstab} successfully",
            failure=f"Failed to re-mount all entries from {ctx.paths.fstab}",
            run=lambda c: mount_all(dry_run=c.dry_run),
        )

        yield Action(
            description=f"Displaying package information from the {repo_id} repository",
            success=f"Displayed package information from {repo_id} repository successfully",
            failure=f"Failed to display package information from {repo_id} repository",
            run=_list_repo_packages,
        )
