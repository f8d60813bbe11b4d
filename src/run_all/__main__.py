"""Allow ``python -m run_all`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m run_all`` behaves identically to the ``run-all`` console
script.
"""

from __future__ import annotations

from run_all.cli.app import cli

if __name__ == "__main__":
    cli()
