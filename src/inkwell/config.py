"""
Contract Configuration.

Holds the settings given in the ``@ink.contract(...)`` decorator (or in the
``[tool.inkwell]`` table of ``pyproject.toml``). The frontend itself only reads
`original_mod_name`, the name given to the stripped twin of the contract class.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Tuple

import libcst as cst
from libcst.helpers import get_full_name_for_node
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from inkwell.errors import ConfigurationError

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib


class ContractConfig(BaseModel):
  """
  Configuration of a single ink contract.
  """

  model_config = ConfigDict(extra="forbid", strict=True)

  types: str = Field("DefaultEnvironment", description="Environment type used by the contract.")
  storage_alloc: bool = Field(True, description="Enables the dynamic storage allocator facilities.")
  as_dependency: bool = Field(False, description="Compile as if the contract was a dependency of another one.")
  original_mod_name: Optional[str] = Field(None, description="Name given to the stripped 'original' twin.")

  @property
  def rename_target(self) -> Optional[str]:
    """
    The configured name of the stripped twin, if any.

    Returns:
        Optional[str]: Raw configured value. Not validated here.
    """
    return self.original_mod_name

  @classmethod
  def from_args(cls, args: Sequence[cst.Arg]) -> "ContractConfig":
    """
    Builds a configuration from the arguments of an ``@ink.contract(...)`` call.

    Every argument must be a keyword argument whose value is a string literal,
    ``True``/``False``, an integer or a (dotted) name.

    Args:
        args: The call arguments.

    Returns:
        ContractConfig: The validated configuration.

    Raises:
        ConfigurationError: On positional, duplicated, unknown or ill-typed entries.
    """
    values: Dict[str, Any] = {}
    for arg in args:
      if arg.keyword is None or arg.star:
        raise ConfigurationError("contract configuration only accepts 'key=value' entries")
      key = arg.keyword.value
      if key in values:
        raise ConfigurationError(f"duplicate configuration key '{key}'", key=key)
      values[key] = _literal_value(key, arg.value)

    try:
      return cls.model_validate(values)
    except ValidationError as e:
      first = e.errors()[0]
      key = str(first["loc"][0]) if first["loc"] else None
      raise ConfigurationError(f"invalid configuration for '{key}': {first['msg']}", key=key) from e

  @classmethod
  def from_source(cls, text: str) -> "ContractConfig":
    """
    Parses raw configuration text such as ``original_mod_name="plain", as_dependency=True``.

    Args:
        text: The configuration source.

    Returns:
        ContractConfig: The validated configuration.
    """
    if not text.strip():
      return cls()

    try:
      expr = cst.parse_expression(f"_({text})")
    except cst.ParserSyntaxError as e:
      raise ConfigurationError(f"malformed contract configuration: {e.message}") from e

    if not isinstance(expr, cst.Call):
      raise ConfigurationError("malformed contract configuration")
    return cls.from_args(expr.args)

  def merge(self, other: "ContractConfig") -> "ContractConfig":
    """
    Layers `other` on top of this configuration.

    Only fields explicitly set on `other` override; unset ones keep this
    configuration's values.

    Args:
        other (ContractConfig): The higher priority configuration.

    Returns:
        ContractConfig: A new merged configuration.
    """
    values = self.model_dump(exclude_unset=True)
    values.update(other.model_dump(exclude_unset=True))
    return type(self).model_validate(values)

  @classmethod
  def load(cls, search_path: Optional[Path] = None) -> "ContractConfig":
    """
    Loads project defaults from the ``[tool.inkwell]`` table of the nearest pyproject.toml.

    Args:
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        ContractConfig: The project configuration (defaults if none is found).

    Raises:
        ConfigurationError: If the table holds unknown keys or ill-typed values.
    """
    toml_config, toml_dir = _load_toml_settings(search_path or Path.cwd())

    try:
      return cls.model_validate(toml_config)
    except ValidationError as e:
      raise ConfigurationError(f"invalid [tool.inkwell] configuration in {toml_dir}: {e}") from e


def _literal_value(key: str, node: cst.BaseExpression) -> Any:
  """
  Converts a configuration value expression to a Python value.
  """
  if isinstance(node, cst.SimpleString):
    value = node.evaluated_value
    if isinstance(value, str):
      return value
  elif isinstance(node, cst.Integer):
    return node.evaluated_value
  elif isinstance(node, cst.Name):
    if node.value == "True":
      return True
    if node.value == "False":
      return False
    return node.value
  elif isinstance(node, cst.Attribute):
    return get_full_name_for_node(node)

  raise ConfigurationError(f"unsupported value for configuration key '{key}'", key=key)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Recursively searches parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory definition was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"cannot read {toml_path}: {e}") from e

      tool_section = data.get("tool", {})
      return tool_section.get("inkwell", {}), parent

  return {}, None
