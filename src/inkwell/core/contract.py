"""
Contract Definition.

The root of an ink contract as seen by the code generators. A `Contract` holds:

* the IR of the annotated contract class,
* the stripped "original" twin, built once at construction,
* the contract configuration,
* the raw contract source, kept so generators can re-derive the twin.

Example::

    @ink.contract(original_mod_name="plain")
    class Flipper:
        @ink.storage
        class Storage:
            value: bool

        @ink.message
        def flip(self):
            ...
"""

import logging
from typing import Optional, Tuple

import libcst as cst
from libcst.metadata import CodeRange, MetadataWrapper, PositionProvider

from inkwell.config import ContractConfig
from inkwell.core.eraser import StrippedModule, attribute_path, strip_module
from inkwell.core.ir import ItemMod, build_item_mod, find_contract_class
from inkwell.core.naming import resolve_target_name
from inkwell.errors import ConfigurationError, ParseError

logger = logging.getLogger(__name__)

CONTRACT_PATH = ("ink", "contract")


class Contract:
  """
  An ink contract: configuration, IR and stripped twin.
  """

  def __init__(self, item: ItemMod, original_item: StrippedModule, config: ContractConfig, raw_module: str):
    self._item = item
    self._original_item = original_item
    self._config = config
    self.raw_module = raw_module

  @classmethod
  def new(cls, ink_config: str, ink_module: str) -> "Contract":
    """
    Creates a contract from raw configuration text and contract source.

    Args:
        ink_config (str): Configuration, e.g. ``original_mod_name="plain"``.
        ink_module (str): Source holding the contract class.

    Returns:
        Contract: The contract.

    Raises:
        ConfigurationError: If the configuration is invalid.
        ParseError: If the source is not a valid contract module.
    """
    return cls.from_config(ContractConfig.from_source(ink_config), ink_module)

  @classmethod
  def parse(cls, source: str) -> "Contract":
    """
    Creates a contract from a source file whose contract class carries
    ``@ink.contract(...)``. The decorator's arguments become the configuration.

    Args:
        source (str): Contract source.

    Returns:
        Contract: The contract.
    """
    config, span = _read_contract_decorator(source)
    return cls.from_config(config, source, config_span=span)

  @classmethod
  def from_config(
    cls, config: ContractConfig, ink_module: str, config_span: Optional[CodeRange] = None
  ) -> "Contract":
    """
    Creates a contract from an already built configuration.

    Args:
        config (ContractConfig): The contract configuration.
        ink_module (str): Source holding the contract class.
        config_span (Optional[CodeRange]): Where the configuration was written, for error reports.

    Returns:
        Contract: The contract.
    """
    # Validate before any tree is built.
    resolve_target_name(config, span=config_span)

    item = build_item_mod(MetadataWrapper(_parse(ink_module)))
    original_item = strip_module(ink_module, config)
    logger.debug(
      "Built contract '%s' with %d erased annotations",
      item.name,
      len(original_item.erased),
    )
    return cls(item, original_item, config, ink_module)

  def module(self) -> ItemMod:
    """
    Returns the IR of the contract class.
    """
    return self._item

  def original_module(self) -> StrippedModule:
    """
    Returns the stripped twin built at construction.
    """
    return self._original_item

  def config(self) -> ContractConfig:
    """
    Returns the contract configuration.
    """
    return self._config

  @property
  def original_name(self) -> Optional[str]:
    """Name given to the stripped twin, if the source held a class."""
    renamed = self._original_item.renamed
    return renamed.new_name if renamed else None


def _parse(source: str) -> cst.Module:
  try:
    return cst.parse_module(source)
  except cst.ParserSyntaxError as e:
    raise ParseError.from_syntax_error(e) from e


def contract_config(source: str) -> ContractConfig:
  """
  Reads the configuration given in the ``@ink.contract(...)`` decorator.

  Args:
      source (str): Contract source.

  Returns:
      ContractConfig: Configuration holding only the decorator's entries.

  Raises:
      ParseError: If the source holds no class decorated with ``@ink.contract``.
      ConfigurationError: If the decorator arguments are invalid.
  """
  return _read_contract_decorator(source)[0]


def _read_contract_decorator(source: str) -> Tuple[ContractConfig, CodeRange]:
  wrapper = MetadataWrapper(_parse(source))
  class_def = find_contract_class(wrapper.module)

  for decorator in class_def.decorators:
    expr = decorator.decorator
    if attribute_path(expr) == CONTRACT_PATH:
      span = wrapper.resolve(PositionProvider)[decorator]
      args = expr.args if isinstance(expr, cst.Call) else ()
      try:
        return ContractConfig.from_args(args), span
      except ConfigurationError as e:
        if e.span is None:
          e.span = span
        raise

  raise ParseError(f"invalid source: class '{class_def.name.value}' is not decorated with @ink.contract")
