from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ProvisionPaths:
    backing_file: str = "/var/tmp/ukol.img"
    backing_file_mib: int = 200
    mount_point: str = "/var/www/html/ukol"
    fstab: str = "/etc/fstab"
    fs_type: str = "ext4"
    repo_id: str = "ukol"
    repo_name: str = "Ukol Repository"
    repo_baseurl: str = "http://localhost/ukol"
    repo_file: str = "/etc/yum.repos.d/ukol.repo"
    web_service: str = "httpd"
    essential_packages: Tuple[str, ...] = ("httpd", "createrepo")
    state_default: str = "/var/lib/ukol-provisioner/run.json"
    log_default: str = "/var/log/ukol-provisioner.log"


PATHS = ProvisionPaths()
