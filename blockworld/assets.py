"""Access to files below the assets directory."""

import re
from pathlib import Path

from blockworld.env import get_assets_path


def get_root_path():
    """Return the assets root directory."""
    return get_assets_path()


def get_absolute_path(path):
    """Return ``path`` (which starts with ``/``) joined onto the assets root."""
    return get_assets_path() + path


def iter_files(path, pattern=None):
    """Yield the entries of an assets directory whose full path matches ``pattern``."""
    directory = Path(get_absolute_path(path))
    regex = re.compile(pattern) if pattern is not None else None
    for entry in sorted(directory.iterdir()):
        if regex is None or regex.fullmatch(str(entry)):
            yield entry


def load_string(filename):
    """Return the whole contents of an asset file as text."""
    with open(get_absolute_path(filename), encoding="utf-8", newline="") as handle:
        return handle.read()