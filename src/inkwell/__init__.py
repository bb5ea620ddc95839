"""
inkwell Package.

Frontend for ink contracts written as annotated Python classes. It builds the
intermediate model of a contract and its stripped "original" twin: the same
source with every ``@ink...`` decorator replaced by the inert
``@doc("inline")`` and the contract class renamed.

Usage
-----

.. code-block:: python

    import inkwell

    code = '''
    @ink.contract
    class Flipper:
        @ink.message
        def flip(self): ...
    '''
    print(inkwell.strip(code))
    # @doc("inline")
    # class original:
    #     @doc("inline")
    #     def flip(self): ...
"""

from typing import Optional

from inkwell.config import ContractConfig
from inkwell.core.contract import Contract
from inkwell.core.eraser import StrippedModule, strip_module
from inkwell.errors import ConfigurationError, InkError, ParseError

__version__ = "0.0.1"


def strip(code: str, rename_target: Optional[str] = None) -> str:
  """
  Returns the stripped twin of a contract source.

  Args:
      code (str): Contract source.
      rename_target (str, optional): Class name of the twin. Defaults to ``original``.

  Returns:
      str: The stripped source.

  Raises:
      ConfigurationError: If `rename_target` is not a legal identifier.
      ParseError: If `code` is not valid Python.
  """
  return strip_module(code, ContractConfig(original_mod_name=rename_target)).code


__all__ = [
  "ConfigurationError",
  "Contract",
  "ContractConfig",
  "InkError",
  "ParseError",
  "StrippedModule",
  "strip",
  "__version__",
]
