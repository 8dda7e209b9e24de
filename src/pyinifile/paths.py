"""Locations of per-user option files."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir as _uc

DEFAULT_APP_NAME = "pyinifile"
ENV_APP_NAME = "PYINIFILE_APP_NAME"


def user_config_dir(app_name: str = DEFAULT_APP_NAME) -> Path:
    """Return the directory holding option files for *app_name*.

    ``PYINIFILE_APP_NAME`` replaces *app_name*, so a whole process can be
    pointed at another application's option files.
    """
    return Path(_uc(appname=os.getenv(ENV_APP_NAME) or app_name)).resolve()


def config_file(
    identifier: str, app_name: str = DEFAULT_APP_NAME, suffix: str = ".conf"
) -> Path:
    """Return the per-user configuration file for *identifier*.

    ``config_file("player")`` resolves to ``<user config dir>/player.conf``.
    """
    if not identifier or Path(identifier).name != identifier:
        raise ValueError(f"invalid config identifier: {identifier!r}")
    return user_config_dir(app_name) / f"{identifier}{suffix}"
