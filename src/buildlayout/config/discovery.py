"""Config file discovery.

Walk-up finder locates buildlayout.toml, the same way a build tool finds its
root settings file. Supports the BUILDLAYOUT_CONFIG env var and --config.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "buildlayout.toml"
CONFIG_ENV_VAR = "BUILDLAYOUT_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for buildlayout.toml.

    Checks BUILDLAYOUT_CONFIG first; a set-but-missing env path yields None.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if current.parent == current:
            return None
        current = current.parent
