from __future__ import annotations

import logging
from typing import Iterator

from ..context import ProvisionContext
from ..lib.pkg import yum_download
from ..lib.yum_repo import (
    RepoDefinition,
    create_repo_metadata,
    restore_selinux_context,
    write_repo_file,
)
from ..pipeline import Action

logger = logging.getLogger(__name__)


def repo_definition(ctx: ProvisionContext) -> RepoDefinition:
    return RepoDefinition(
        repo_id=ctx.paths.repo_id,
        name=ctx.paths.repo_name,
        baseurl=ctx.paths.repo_baseurl,
    )


class PopulateRepoStep:
    step_id = "40_populate_repo"

    def actions(self, ctx: ProvisionContext) -> Iterator[Action]:
        repo_dir = ctx.paths.mount_point

        for package in ctx.packages:
            yield Action(
                description=f"Downloading package {package} with yum",
                success=f"Downloaded package: {package} with yum",
                failure=f"Failed to download package: {package} with yum",
                run=lambda c, p=package: yum_download(p, repo_dir, dry_run=c.dry_run),
            )

        yield Action(
            description=f"Generating repository metadata at {repo_dir}",
            success="Generated repository metadata successfully",
            failure="Failed to generate repository metadata",
            run=lambda c: create_repo_metadata(repo_dir, dry_run=c.dry_run),
        )

        yield Action(
            description=f"Restoring SELinux context for {repo_dir}",
            success="Restored SELinux context successfully",
            failure="Failed to restore SELinux context",
            run=lambda c: restore_selinux_context(repo_dir, dry_run=c.dry_run),
        )

        repo = repo_definition(ctx)
        repo_file = ctx.paths.repo_file
        yield Action(
            description=f"Writing {repo.repo_id} repository configuration to {repo_file}",
            success=f"Created {repo.repo_id} repository configuration file successfully",
            failure=f"Failed to create {repo.repo_id} repository configuration file",
            run=lambda c: write_repo_file(repo_file, repo, dry_run=c.dry_run),
        )
