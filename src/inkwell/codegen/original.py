"""
Original-Twin Generator.

Emits the stripped twin of a contract: the contract source with every ``ink``
decorator replaced by ``@doc("inline")`` and the contract class renamed.

The twin is re-derived from the contract's raw source through the same
`strip_module` used at construction, so the output matches
``contract.original_module().code`` exactly.
"""

import logging

from inkwell.codegen.base import GenerateCode
from inkwell.core.eraser import strip_module

logger = logging.getLogger(__name__)


class OriginalGenerator(GenerateCode):
  """
  Generates the stripped 'original' module of a contract.
  """

  def generate_code(self) -> str:
    stripped = strip_module(self.contract.raw_module, self.contract.config())
    logger.debug("Regenerated original module '%s'", stripped.target_name)
    return stripped.code
