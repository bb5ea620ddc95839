"""
Tests for the Original-Twin Generator.

The twin stored on the contract at construction and the twin regenerated at
generation time must be identical.
"""

import pytest

from inkwell.codegen import GenerateCode, OriginalGenerator, generate_code
from inkwell.core.contract import Contract


@pytest.mark.parametrize("config", ["", 'original_mod_name="plain"', "original_mod_name=twin, as_dependency=True"])
def test_regenerated_twin_matches_stored(flipper_source, config):
  contract = Contract.new(config, flipper_source)

  regenerated = OriginalGenerator(contract).generate_code()

  assert regenerated == contract.original_module().code


def test_generate_code_helper(flipper_source):
  contract = Contract.parse(flipper_source)
  assert generate_code(OriginalGenerator, contract) == contract.original_module().code


def test_generator_output(flipper_source):
  code = OriginalGenerator(Contract.parse(flipper_source)).generate_code()

  assert code.count('@doc("inline")') == 4
  assert "class plain:" in code
  assert "def helper(self):" in code


def test_generator_is_abstract():
  with pytest.raises(TypeError):
    GenerateCode(None)
