"""
Helpers shared by the command handlers.
"""

from pathlib import Path
from typing import Optional

from inkwell.config import ContractConfig
from inkwell.core.contract import Contract, contract_config
from inkwell.errors import ParseError


def load_contract(input_path: Path, rename: Optional[str] = None) -> Contract:
  """
  Reads a contract file and builds the `Contract`.

  Configuration layers, lowest priority first: ``[tool.inkwell]`` in the
  nearest pyproject.toml, the ``@ink.contract(...)`` arguments, then `rename`.

  Args:
      input_path: Contract source file.
      rename: Optional override for the twin's name.

  Returns:
      Contract: The contract.

  Raises:
      ParseError: If the file cannot be read or decoded, or is not a contract.
      ConfigurationError: If the configuration is invalid.
  """
  try:
    with open(input_path, "rt", encoding="utf-8") as f:
      code = f.read()
  except UnicodeDecodeError as e:
    raise ParseError(f"invalid source: not UTF-8 encoded ({e.reason} at byte {e.start})") from e
  except OSError as e:
    raise ParseError(f"invalid source: cannot read {input_path}: {e.strerror}") from e

  config = ContractConfig.load(search_path=input_path.parent).merge(contract_config(code))
  if rename is not None:
    config = config.merge(ContractConfig(original_mod_name=rename))

  return Contract.from_config(config, code)
