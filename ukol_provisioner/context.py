from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .lib.env import PATHS, ProvisionPaths
from .logging_utils import ProgressReporter


@dataclass
class ProvisionContext:
    """Everything a step needs, threaded explicitly through the pipeline.

    loop_device is filled in by the loop device step and read by every step
    after it. completed collects the success message of each finished action.
    """

    packages: Tuple[str, ...] = ()
    paths: ProvisionPaths = PATHS
    dry_run: bool = False
    reporter: ProgressReporter = field(default_factory=ProgressReporter)
    loop_device: Optional[str] = None
    completed: List[str] = field(default_factory=list)

    def require_loop_device(self) -> str:
        if not self.loop_device:
            raise RuntimeError("No loop device attached; run the loop device step first")
        return self.loop_device
