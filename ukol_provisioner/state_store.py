from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)


def _detect_format(path: Path) -> str:
    ext = path.suffix.lower().lstrip(".")
    if ext in {"yaml", "yml"}:
        return "yaml"
    # Default to JSON for unknown extensions.
    return "json"


def save_state(path: str, state: Dict[str, Any]) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    if _detect_format(p) == "yaml":
        p.write_text(yaml.safe_dump(state, sort_keys=False), encoding="utf-8")
    else:
        p.write_text(json.dumps(state, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    logger.info("Saved run record to %s", p)


def new_state(*, packages: list[str], dry_run: bool) -> Dict[str, Any]:
    """A fresh run record. Previous records are overwritten, never resumed."""

    return {
        "version": 1,
        "config": {"packages": list(packages), "dry_run": dry_run},
        "execution": {
            "paths": {},
            "loop_device": None,
            "ran_steps": [],
            "completed_actions": [],
            "errors": [],
        },
    }
