from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FstabEntry:
    spec: str
    mountpoint: str
    fstype: str
    options: str = "defaults"
    dump: int = 0
    passno: int = 0

    def render(self) -> str:
        return f"{self.spec} {self.mountpoint} {self.fstype} {self.options} {self.dump} {self.passno}\n"


def append_fstab_entry(fstab_path: str, entry: FstabEntry, *, dry_run: bool = False) -> None:
    """Append one entry to fstab.

    Existing lines are never inspected, so repeated runs accumulate
    duplicate entries.
    """

    line = entry.render()
    if dry_run:
        logger.info("Would append to %s: %s", fstab_path, line.strip())
        return

    with Path(fstab_path).open("a", encoding="utf-8") as f:
        f.write(line)
    logger.info("Appended to %s: %s", fstab_path, line.strip())
