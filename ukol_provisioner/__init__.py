"""ukol provisioner (one-shot, fail-fast).

Builds a local yum repository on a loop-device backed ext4 filesystem and
serves it with httpd:
- Ordered steps, each a list of external commands
- First failing command aborts the run (exit 1), nothing is rolled back
- Numbered progress on stdout, full command log in a file
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
