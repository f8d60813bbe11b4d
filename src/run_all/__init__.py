"""run-all — argument parsing for grouped npm-script style task runs.

Turns a flat token list into ordered run groups, global flags, and
package-config overrides.
"""

from run_all.core.parser import parse_cli_args
from run_all.version import __version__

__all__: list[str] = ["__version__", "parse_cli_args"]
