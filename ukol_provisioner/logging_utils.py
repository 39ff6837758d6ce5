from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterable, Optional, TextIO

FALLBACK_LOG_NAME = "ukol-provisioner.log"

_FORMAT = logging.Formatter(
    fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S%z",
)


def _open_log_file(candidates: Iterable[Path]) -> tuple[Optional[logging.Handler], Optional[str]]:
    for path in candidates:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            return logging.FileHandler(path), str(path)
        except OSError:
            continue
    return None, None


def configure_logging(
    log_path: str,
    *,
    level: int = logging.DEBUG,
    also_console: bool = True,
    console_level: int = logging.WARNING,
) -> Optional[str]:
    """Attach file and console handlers to the root logger, once.

    The log file is tried at log_path, then in the working directory. When
    neither is writable, logging goes to the console only and None is
    returned; otherwise the path of the file actually in use.

    The console handler defaults to WARNING since stdout already carries
    the numbered progress lines.
    """

    root = logging.getLogger()
    if getattr(root, "_ukol_configured", False):
        return getattr(root, "_ukol_log_path", None)

    root.setLevel(level)

    file_handler, chosen_path = _open_log_file([Path(log_path), Path.cwd() / FALLBACK_LOG_NAME])
    if file_handler is not None:
        file_handler.setFormatter(_FORMAT)
        root.addHandler(file_handler)

    if also_console or file_handler is None:
        console = logging.StreamHandler()
        console.setLevel(console_level)
        console.setFormatter(_FORMAT)
        root.addHandler(console)

    setattr(root, "_ukol_configured", True)
    setattr(root, "_ukol_log_path", chosen_path)

    log = logging.getLogger(__name__)
    if chosen_path is None:
        log.warning("No writable log file (requested=%s); logging to console only", log_path)
    else:
        log.info("Logging initialized (requested=%s, actual=%s)", log_path, chosen_path)
    return chosen_path


class ProgressReporter:
    """Numbered operator-facing progress lines on stdout.

    Output shape::

        1) Creating file /var/tmp/ukol.img of size 200
        SUCCESS: Created file /var/tmp/ukol.img of size 200
        <blank>
    """

    def __init__(self, stream: Optional[TextIO] = None, start: int = 1) -> None:
        self._stream = stream
        self.index = start

    @property
    def stream(self) -> TextIO:
        # Resolved late so pytest's capsys sees the writes.
        return self._stream if self._stream is not None else sys.stdout

    def _emit(self, line: str) -> None:
        print(line, file=self.stream, flush=True)

    def announce(self, message: str) -> int:
        n = self.index
        self._emit(f"{n}) {message}")
        self.index += 1
        return n

    def success(self, message: str) -> None:
        self._emit(f"SUCCESS: {message}")
        self._emit("")

    def failure(self, message: str) -> None:
        self._emit(f"ERROR: {message}")

    def output(self, text: str) -> None:
        """Echo captured command output verbatim."""
        text = (text or "").rstrip("\n")
        if text:
            self._emit(text)
