from .step_10_install_essentials import InstallEssentialsStep
from .step_20_loop_device import LoopDeviceStep
from .step_30_filesystem import FilesystemStep
from .step_40_populate_repo import PopulateRepoStep
from .step_50_activate_services import ActivateServicesStep
from .step_60_verify import VerifyStep

__all__ = [
    "InstallEssentialsStep",
    "LoopDeviceStep",
    "FilesystemStep",
    "PopulateRepoStep",
    "ActivateServicesStep",
    "VerifyStep",
]
