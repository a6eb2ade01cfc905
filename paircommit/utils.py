"""Shared file utilities for paircommit.

Contains:
- write_yaml_atomically: Write YAML through a temp file and an atomic rename
"""

import os
import tempfile
from pathlib import Path

import yaml


def write_yaml_atomically(path: Path, data: dict) -> None:
    """Write data as YAML to a temp file next to path and rename it into place.

    Readers never observe a truncated file: either the old or the new
    content is present.

    Args:
        path: Destination file. Parent directories are created.
        data: Mapping to dump.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise
