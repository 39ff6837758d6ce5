from __future__ import annotations

import logging
from typing import Iterator

from ..context import ProvisionContext
from ..lib.pkg import yum_install
from ..pipeline import Action

logger = logging.getLogger(__name__)


class InstallEssentialsStep:
    step_id = "10_install_essentials"

    def actions(self, ctx: ProvisionContext) -> Iterator[Action]:
        # One yum transaction per package so a failure names the package.
        for package in ctx.paths.essential_packages:
            yield Action(
                description=f"Installing essential package {package} with yum",
                success=f"Installed essential package {package} successfully",
                failure=f"Failed to install essential package {package} with yum",
                run=lambda c, p=package: yum_install([p], dry_run=c.dry_run),
            )
