"""Server entry point."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

_GREETING = "Dies ist der Server"


def _build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="sysmonagent-server",
        description="Start the monitoring server.",
    )


def _announce(out: TextIO) -> None:
    out.write(f"{_GREETING}\n")
    out.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line, announce the server and return the exit status."""
    parser = _build_parser()
    parser.parse_known_args(None if argv is None else list(argv))
    _announce(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())