"""Allow ``python -m crystallize_setup`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m crystallize_setup`` behaves identically to the
``crystallize-setup`` console script.
"""

from __future__ import annotations

from crystallize_setup.cli.app import cli

if __name__ == "__main__":
    cli()
