from __future__ import annotations

import logging
from typing import Iterator

from ..context import ProvisionContext
from ..lib.services import enable_service, start_service
from ..pipeline import Action

logger = logging.getLogger(__name__)


class ActivateServicesStep:
    step_id = "50_activate_services"

    def actions(self, ctx: ProvisionContext) -> Iterator[Action]:
        unit = ctx.paths.web_service

        yield Action(
            description="Starting Apache HTTP server",
            success="Started Apache HTTP server successfully",
            failure="Failed to start Apache HTTP server",
            run=lambda c: start_service(unit, dry_run=c.dry_run),
        )

        yield Action(
            description="Enabling Apache HTTP server to start on boot",
            success="Enabled Apache HTTP server to start on boot successfully",
            failure="Failed to enable Apache HTTP server to start on boot",
            run=lambda c: enable_service(unit, dry_run=c.dry_run),
        )
