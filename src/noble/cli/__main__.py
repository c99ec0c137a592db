"""
Main Entry Point for the noble CLI.

This module handles argument parsing and dispatches to the command handlers
defined in `noble.cli.handlers`.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from noble import __version__
from noble.cli import handlers
from noble.compiler.registry import available_formats
from noble.utils.console import console


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="noble: wrap annotated Rust items in unsafe regions")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: EXPAND ---
  cmd_exp = subparsers.add_parser("expand", help="Expand annotated items of an item document or directory")
  cmd_exp.add_argument("path", type=Path, help="Input item document (.json) or directory")
  cmd_exp.add_argument("--out", type=Path, help="Output destination (file or dir). Defaults to stdout for files.")
  cmd_exp.add_argument(
    "--format",
    dest="output_format",
    choices=available_formats(),
    default=None,
    help="Output format (default: from toml, else rust)",
  )
  cmd_exp.add_argument(
    "--strict",
    action="store_true",
    default=None,
    help="Fail when an annotated item cannot be expanded (Overrides config)",
  )
  cmd_exp.add_argument(
    "--no-idempotent",
    dest="idempotent",
    action="store_false",
    default=None,
    help="Wrap bodies again even if they already are a single unsafe block",
  )
  cmd_exp.add_argument("--workers", type=int, default=None, help="Worker threads per document")

  # --- Command: CHECK ---
  cmd_check = subparsers.add_parser("check", help="List annotated items and whether they can be expanded")
  cmd_check.add_argument("path", type=Path, help="Input item document (.json) or directory")

  args = parser.parse_args(argv)

  if args.verbose:
    console.set_level(logging.DEBUG)

  if args.command == "expand":
    return handlers.handle_expand(
      args.path,
      args.out,
      args.output_format,
      args.strict,
      args.idempotent,
      args.workers,
    )

  elif args.command == "check":
    return handlers.handle_check(args.path)

  return 0


if __name__ == "__main__":
  sys.exit(main())
