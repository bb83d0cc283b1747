"""Environment and executable location helpers."""

import os
import sys
from pathlib import Path

ASSETS_PATH_VARIABLE = "BLOCKWORLD_ASSETS_PATH"


def dump_env(environ):
    """Print every ``KEY=VALUE`` pair of ``environ`` on its own line."""
    if environ is None:
        return
    for key, value in environ.items():
        print(f"{key}={value}")


def get_env_var(key):
    """Return the value of an environment variable, or ``""`` when unset."""
    return os.environ.get(key, "")


def get_executable_path():
    """Return the full path of the running program, or ``""`` if unknown."""
    if not sys.argv:
        return ""
    program = sys.argv[0]
    if not program or program == "-c":
        return ""
    return os.path.realpath(program)


def get_executable_dir():
    """Return the directory that holds the running program."""
    return Path(get_executable_path()).parent


def get_assets_path():
    """Return the assets directory, honouring ``BLOCKWORLD_ASSETS_PATH``."""
    value = get_env_var(ASSETS_PATH_VARIABLE)
    if value:
        return value
    base = str(get_executable_dir()) if get_executable_path() else ""
    return base + "/assets"