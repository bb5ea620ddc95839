"""
Target-Name Resolution.

Derives the identifier given to the stripped twin of a contract. Both the
contract constructor and the code generator resolve the name here, so the two
can never disagree.
"""

import keyword
from typing import Optional

from libcst.metadata import CodeRange

from inkwell.config import ContractConfig
from inkwell.errors import ConfigurationError

DEFAULT_ORIGINAL_NAME = "original"


def is_legal_identifier(name: str) -> bool:
  """
  Checks that `name` can be used as a bare class name.

  Args:
      name (str): Candidate identifier.

  Returns:
      bool: True if it is a non-keyword Python identifier.
  """
  return name.isidentifier() and not keyword.iskeyword(name)


def resolve_target_name(config: Optional[ContractConfig], span: Optional[CodeRange] = None) -> str:
  """
  Resolves the rename target from configuration.

  Args:
      config (Optional[ContractConfig]): The contract configuration.
      span (Optional[CodeRange]): Location of the configuration, attached to errors.

  Returns:
      str: The configured identifier, or ``"original"`` when none is set.

  Raises:
      ConfigurationError: If the configured value is not a legal identifier.
  """
  target = config.rename_target if config is not None else None
  if target is None:
    return DEFAULT_ORIGINAL_NAME

  if not is_legal_identifier(target):
    raise ConfigurationError(
      f"invalid rename target: not a legal identifier: {target!r}",
      key="original_mod_name",
      span=span,
    )
  return target
