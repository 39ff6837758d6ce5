from __future__ import annotations

import logging
from typing import Sequence

from .command import CmdResult, run_cmd

logger = logging.getLogger(__name__)


def yum_install(packages: Sequence[str], *, dry_run: bool = False) -> None:
    if not packages:
        return
    run_cmd(["yum", "install", "-y", *packages], dry_run=dry_run)


def yum_download(package: str, download_dir: str, *, dry_run: bool = False) -> None:
    """Fetch a package and its missing dependencies without installing them."""

    run_cmd(
        [
            "yum",
            "install",
            "-y",
            "--downloadonly",
            f"--downloaddir={download_dir}",
            package,
        ],
        dry_run=dry_run,
    )


def yum_repolist(*, dry_run: bool = False) -> CmdResult:
    return run_cmd(["yum", "repolist"], dry_run=dry_run)


def yum_list_repo(repo_id: str, *, dry_run: bool = False) -> CmdResult:
    """List packages available from repo_id only; every other repo is disabled."""

    return run_cmd(
        ["yum", "--disablerepo=*", f"--enablerepo={repo_id}", "list", "available"],
        dry_run=dry_run,
    )
