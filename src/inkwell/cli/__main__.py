"""
Main Entry Point for the inkwell CLI.

Parses arguments and dispatches to the handlers in `inkwell.cli.commands`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from inkwell import __version__
from inkwell.cli import commands


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="inkwell: ink contract frontend")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: STRIP ---
  cmd_strip = subparsers.add_parser("strip", help="Emit the contract with all ink annotations erased")
  cmd_strip.add_argument("path", type=Path, help="Contract source file")
  cmd_strip.add_argument("--rename", default=None, help="Class name of the stripped module (default: from config)")
  cmd_strip.add_argument("--out", type=Path, default=None, help="Output file (default: stdout)")

  # --- Command: INSPECT ---
  cmd_insp = subparsers.add_parser("inspect", help="List the ink annotations of a contract")
  cmd_insp.add_argument("path", type=Path, help="Contract source file")
  cmd_insp.add_argument("--json", action="store_true", help="Print JSON instead of tables")

  args = parser.parse_args(argv)

  if args.command == "strip":
    return commands.handle_strip(args.path, args.out, args.rename)

  elif args.command == "inspect":
    return commands.handle_inspect(args.path, args.json)

  return 0


if __name__ == "__main__":
  sys.exit(main())
