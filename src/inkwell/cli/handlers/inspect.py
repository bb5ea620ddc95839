"""
Inspect Command Handler.

Implements ``inkwell inspect``: shows the annotated items of a contract and
the decorators erased from its stripped twin, as a table or as JSON.
"""

import json
from dataclasses import asdict
from pathlib import Path

from rich.markup import escape
from rich.table import Table

from inkwell.cli.handlers.common import load_contract
from inkwell.core.contract import Contract
from inkwell.errors import InkError
from inkwell.utils.console import console, log_error


def handle_inspect(input_path: Path, as_json: bool = False) -> int:
  """
  Handles the 'inspect' command execution.

  Args:
      input_path: Contract source file.
      as_json: Print a JSON document instead of tables.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  if not input_path.is_file():
    log_error(f"Input not found: {input_path}")
    return 1

  try:
    contract = load_contract(input_path)
  except InkError as e:
    log_error(f"Failed to inspect [path]{input_path}[/path]: {escape(str(e))}")
    return 1

  if as_json:
    print(json.dumps(_to_json(contract), indent=2))
  else:
    _print_tables(contract)
  return 0


def _to_json(contract: Contract) -> dict:
  original = contract.original_module()
  return {
    "module": asdict(contract.module()),
    "config": contract.config().model_dump(),
    "original": {
      "name": original.target_name,
      "erased": [asdict(rec) for rec in original.erased],
      "renamed": asdict(original.renamed) if original.renamed else None,
    },
  }


def _print_tables(contract: Contract) -> None:
  module = contract.module()

  items = Table(title=f"Contract '{escape(module.name)}'")
  items.add_column("Item", style="code")
  items.add_column("Kind")
  items.add_column("Annotations")
  items.add_column("Line", justify="right")

  for attr in module.attributes:
    items.add_row(escape(module.name), "contract", escape(_describe(attr)), str(attr.span.start.line))

  for item in module.annotated_items():
    annotations = ", ".join(_describe(attr) for attr in item.attributes)
    items.add_row(escape(item.name), item.kind, escape(annotations), str(item.span.start.line))

  console.print(items)

  original = contract.original_module()
  erased = Table(title=f"Original module '{escape(original.target_name)}'")
  erased.add_column("Erased", style="code")
  erased.add_column("Line", justify="right")
  erased.add_column("Column", justify="right")
  for rec in original.erased:
    erased.add_row(escape(f"@{rec.original}"), str(rec.span.start.line), str(rec.span.start.column))

  console.print(erased)


def _describe(attr) -> str:
  if attr.args:
    return f"{attr.path}({', '.join(attr.args)})"
  return attr.path
