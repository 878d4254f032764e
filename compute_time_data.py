"""Print the boot wait, load wait and clock offset for a calibration/target pair.

Thin script wrapper around the packaged `rng-timer` CLI.
"""
from __future__ import annotations

from rng_timer.cli.app import run_cli


def main() -> int:
    return run_cli()


if __name__ == "__main__":
    raise SystemExit(main())
