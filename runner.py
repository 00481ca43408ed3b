from __future__ import annotations

"""Repo-root convenience shim for the taskschedule CLI.

This keeps the most common local workflow short:

    python runner.py tasks.txt

It delegates to the canonical entry point:

    python -m taskschedule analyze tasks.txt
"""

import sys


def main() -> int:
    """Analyze a task file.

    A bare file argument is treated as `analyze <file>`; anything else is
    forwarded exactly as in `python -m taskschedule`.
    """

    from taskschedule.cli import main as cli_main

    args = sys.argv[1:]
    if args and args[0] != "analyze" and not args[0].startswith("-"):
        args = ["analyze", *args]
    return cli_main(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
