"""Core layer — argument parsing and the models it produces.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O; the environment is read only through
  :func:`~run_all.core.environment.read_environment`.
* No imports from ``cli``.
"""

from run_all.core.environment import create_package_config, read_environment
from run_all.core.models import ArgumentSet, PackageConfig, RunGroup
from run_all.core.parser import (
    parse_cli_args,
    parse_run_all_args,
    parse_run_p_args,
    parse_run_s_args,
)

__all__: list[str] = [
    "ArgumentSet",
    "PackageConfig",
    "RunGroup",
    "create_package_config",
    "parse_cli_args",
    "parse_run_all_args",
    "parse_run_p_args",
    "parse_run_s_args",
    "read_environment",
]
