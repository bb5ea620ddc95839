"""
Strip Command Handler.

Implements ``inkwell strip``: emits the stripped 'original' twin of a contract
file to stdout or to ``--out``.
"""

from pathlib import Path
from typing import Optional

from rich.markup import escape

from inkwell.cli.handlers.common import load_contract
from inkwell.codegen.original import OriginalGenerator
from inkwell.errors import InkError
from inkwell.utils.console import log_error, log_success


def handle_strip(input_path: Path, output_path: Optional[Path], rename: Optional[str]) -> int:
  """
  Handles the 'strip' command execution.

  Args:
      input_path: Contract source file.
      output_path: Destination file. Prints to stdout if None.
      rename: Override for the twin's class name.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  if not input_path.is_file():
    log_error(f"Input not found: {input_path}")
    return 1

  try:
    contract = load_contract(input_path, rename)
  except InkError as e:
    log_error(f"Failed to strip [path]{input_path}[/path]: {escape(str(e))}")
    return 1

  code = OriginalGenerator(contract).generate_code()

  if output_path is None:
    print(code, end="")
    return 0

  output_path.parent.mkdir(parents=True, exist_ok=True)
  with open(output_path, "wt", encoding="utf-8") as f:
    f.write(code)

  erased = len(contract.original_module().erased)
  log_success(f"Stripped {erased} annotations: [path]{input_path}[/path] -> [path]{output_path}[/path]")
  return 0
