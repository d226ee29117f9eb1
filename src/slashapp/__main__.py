"""Allow ``python -m slashapp`` invocation.

Runs the output-level demo, so ``python -m slashapp /?`` shows the
framework's help layout and ``python -m slashapp /v`` its colors.
"""

from __future__ import annotations

from slashapp.demos.levels import cli

if __name__ == "__main__":
    cli()
