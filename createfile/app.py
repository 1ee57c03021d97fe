"""Package module entry point.

Allows running ``python -m createfile.app [NAME]`` to create a file without
loading Typer or Rich. Messages and exit codes match the ``createfile``
console script defined in ``cli.py``.
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from createfile.allocator import create_unique
from createfile.exceptions import CreateFailedError, CreateFileError, ExhaustedError
from createfile.utils.constant import DEFAULT_FILENAME, DEFAULT_MAX_ATTEMPTS


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parses command-line arguments for the create script.

    Args:
        argv: A sequence of strings representing the command-line arguments.
            Defaults to None, which makes argparse use `sys.argv`.

    Returns:
        An argparse.Namespace object containing the parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="createfile",
        description="Create a file, numbering its name when it is already taken.",
    )
    parser.add_argument(
        "name",
        nargs="?",
        default=DEFAULT_FILENAME,
        help=f"Desired filename (default: {DEFAULT_FILENAME}).",
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=DEFAULT_MAX_ATTEMPTS,
        help="Numbered variants to try before giving up.",
    )
    args = parser.parse_args(argv)
    if args.max_attempts < 0:
        parser.error("--max-attempts must be >= 0")
    return args


def main(argv: Sequence[str] | None = None) -> int:
    """Create the requested file and report the name actually used.

    Returns:
        Process exit status: 0 on success, 1 on any failure.
    """
    args = _parse_args(argv)
    try:
        created = create_unique(args.name, max_attempts=args.max_attempts)
    except ExhaustedError as exc:
        print(f"Error: too many files with similar names to {exc.name}", file=sys.stderr)
        return 1
    except CreateFailedError as exc:
        print(f"Error: couldn't create file {exc.name} ({exc.reason})", file=sys.stderr)
        return 1
    except CreateFileError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Created: {created}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main(sys.argv[1:]))
