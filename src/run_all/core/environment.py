"""Environment snapshot and package-config seeding.

npm exposes a package's ``config`` block to scripts as environment
variables named ``npm_package_config_<name>``, together with the
package name in ``npm_package_name``.  This module turns those into a
:class:`~run_all.core.models.PackageConfig`.

Rules
-----
* :func:`read_environment` is the only function that touches
  ``os.environ``; every other function accepts an explicit mapping.
* No writes to the environment.
"""

from __future__ import annotations

import os
import re
from collections.abc import Mapping

from run_all.core.models import PackageConfig

PACKAGE_NAME_VAR: str = "npm_package_name"
"""Name of the package whose scripts are being run."""

LOGLEVEL_VAR: str = "npm_config_loglevel"
"""npm's log level; ``"silent"`` silences run-all by default."""

CONFIG_VAR_PATTERN: re.Pattern[str] = re.compile(r"npm_package_config_(.+)")


def read_environment() -> dict[str, str]:
    """Return a point-in-time copy of the process environment."""
    return dict(os.environ)


def overwrite_config(
    config: PackageConfig,
    package: str,
    variable: str,
    value: str | None,
) -> None:
    """Write one ``config[package][variable]`` entry, creating the scope."""
    config.overwrite(package, variable, value)


def create_package_config(environ: Mapping[str, str] | None = None) -> PackageConfig:
    """Seed a package config from ``npm_package_config_*`` variables.

    Returns an empty config, without scanning, when no package name is
    available.
    """
    env = read_environment() if environ is None else environ
    config = PackageConfig()
    package = env.get(PACKAGE_NAME_VAR)
    if not package:
        return config

    for key, value in env.items():
        matched = CONFIG_VAR_PATTERN.fullmatch(key)
        if matched is not None:
            overwrite_config(config, package, matched.group(1), value)
    return config


def is_silent_loglevel(environ: Mapping[str, str] | None = None) -> bool:
    """Return ``True`` when npm was asked to be silent."""
    env = read_environment() if environ is None else environ
    return env.get(LOGLEVEL_VAR) == "silent"
