from __future__ import annotations

import argparse
import logging
from typing import Any, Dict, Optional, Sequence

from .context import ProvisionContext
from .lib.env import PATHS, ProvisionPaths
from .logging_utils import ProgressReporter, configure_logging
from .pipeline import StepFailed, run_pipeline
from .state_store import new_state, save_state
from .steps import (
    ActivateServicesStep,
    FilesystemStep,
    InstallEssentialsStep,
    LoopDeviceStep,
    PopulateRepoStep,
    VerifyStep,
)

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

DEFAULT_STATE_PATH = PATHS.state_default
DEFAULT_LOG_PATH = PATHS.log_default


def build_steps():
    return [
        InstallEssentialsStep(),
        LoopDeviceStep(),
        FilesystemStep(),
        PopulateRepoStep(),
        ActivateServicesStep(),
        VerifyStep(),
    ]


def run(
    packages: Sequence[str] = (),
    *,
    state_path: str = DEFAULT_STATE_PATH,
    log_path: str = DEFAULT_LOG_PATH,
    dry_run: bool = False,
    verbose: bool = False,
    paths: ProvisionPaths = PATHS,
    reporter: Optional[ProgressReporter] = None,
) -> Dict[str, Any]:
    """Provision the host once, recording what happened.

    Raises StepFailed on the first failed action. The run record is saved
    either way; nothing done before the failure is rolled back.
    """

    actual_log_path = configure_logging(
        log_path=log_path,
        console_level=logging.INFO if verbose else logging.WARNING,
    )

    state = new_state(packages=list(packages), dry_run=dry_run)
    exe = state["execution"]
    exe["paths"]["log_path_requested"] = log_path
    exe["paths"]["log_path_actual"] = actual_log_path

    ctx = ProvisionContext(
        packages=tuple(packages),
        paths=paths,
        dry_run=dry_run,
        reporter=reporter or ProgressReporter(),
    )

    try:
        result = run_pipeline(ctx=ctx, steps=build_steps())
        exe["ran_steps"] = result.ran_steps
        exe["actions_run"] = result.actions_run
        return state
    except StepFailed as e:
        logger.error("Provisioning aborted in %s: %s", e.step_id, e.message)
        exe["errors"].append({"step": e.step_id, "error": e.message, "cause": str(e.__cause__)})
        raise
    except Exception:
        logger.exception("Provisioner crashed")
        raise
    finally:
        exe["loop_device"] = ctx.loop_device
        exe["completed_actions"] = list(ctx.completed)
        try:
            save_state(state_path, state)
        except OSError as e:
            # The record never decides the exit status.
            logger.warning("Could not save run record to %s: %s", state_path, e)


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(
        prog="ukol-provision",
        description=(
            "Provision a loop-device backed yum repository served by httpd "
            f"at {PATHS.repo_baseurl}."
        ),
    )
    p.add_argument("packages", nargs="*", metavar="PACKAGE", help="Package to download into the repository")
    p.add_argument("--state", default=DEFAULT_STATE_PATH, help="Path to the run record (json|yaml)")
    p.add_argument("--log", default=DEFAULT_LOG_PATH, help="Path to provisioner log")
    p.add_argument("--dry-run", action="store_true", help="Log commands without running them")
    p.add_argument("-v", "--verbose", action="store_true", help="Mirror INFO logs to the console")

    args = p.parse_args(argv)

    try:
        run(
            args.packages,
            state_path=args.state,
            log_path=args.log,
            dry_run=bool(args.dry_run),
            verbose=bool(args.verbose),
            paths=PATHS,
        )
    except StepFailed:
        return EXIT_FAILURE
    return EXIT_SUCCESS


if __name__ == "__main__":
    raise SystemExit(main())
