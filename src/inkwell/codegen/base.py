"""
Code Generator Protocol.

Defines the abstract interface shared by all generators working on a contract.
"""

from abc import ABC, abstractmethod
from typing import Type

from inkwell.core.contract import Contract


class GenerateCode(ABC):
  """
  Abstract base class for contract code generators.
  """

  def __init__(self, contract: Contract):
    self.contract = contract

  @abstractmethod
  def generate_code(self) -> str:
    """
    Emits the generated Python source.

    Returns:
        str: Source code.
    """
    pass


def generate_code(generator: Type[GenerateCode], contract: Contract) -> str:
  """
  Convenience wrapper running `generator` over `contract`.

  Args:
      generator: The generator class.
      contract: The contract to generate code for.

  Returns:
      str: Source code.
  """
  return generator(contract).generate_code()
