from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .command import run_cmd

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RepoDefinition:
    repo_id: str
    name: str
    baseurl: str
    enabled: bool = True
    gpgcheck: bool = False

    def render(self) -> str:
        return "\n".join(
            [
                f"[{self.repo_id}]",
                f"name={self.name}",
                f"baseurl={self.baseurl}",
                f"enabled={int(self.enabled)}",
                f"gpgcheck={int(self.gpgcheck)}",
                "",
            ]
        )


def create_repo_metadata(repo_dir: str, *, dry_run: bool = False) -> None:
    """Generate repodata/ for the RPMs under repo_dir."""

    run_cmd(["createrepo", repo_dir], dry_run=dry_run)


def restore_selinux_context(path: str, *, dry_run: bool = False) -> None:
    # httpd is confined; files keep the wrong label until relabelled.
    run_cmd(["restorecon", "-Rv", path], dry_run=dry_run)


def write_repo_file(path: str, repo: RepoDefinition, *, dry_run: bool = False) -> None:
    p = Path(path)
    if dry_run:
        logger.info("Would write %s", str(p))
        return
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(repo.render(), encoding="utf-8")
    logger.info("Configured yum repo %s: %s", repo.repo_id, repo.baseurl)
