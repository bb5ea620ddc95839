"""
Tests for `Contract` construction (the twin builder).
"""

import textwrap

import pytest

from inkwell.core.contract import Contract, contract_config
from inkwell.errors import ConfigurationError, ParseError

MODULE = textwrap.dedent(
  """\
  class m:
      @ink.track(x)
      def first(self):
          pass

      @other.test
      def second(self):
          pass
  """
)


def test_new_default_name():
  contract = Contract.new("", MODULE)

  assert contract.original_name == "original"
  assert contract.original_module().code.startswith("class original:\n")
  assert contract.module().name == "m"
  assert contract.raw_module == MODULE


def test_new_configured_name():
  contract = Contract.new('original_mod_name="plain"', MODULE)

  assert contract.original_name == "plain"
  assert contract.config().original_mod_name == "plain"


def test_new_bare_name_config():
  assert Contract.new("original_mod_name=plain", MODULE).original_name == "plain"


def test_new_illegal_name():
  with pytest.raises(ConfigurationError):
    Contract.new('original_mod_name="1bad"', MODULE)


def test_new_invalid_source():
  with pytest.raises(ParseError):
    Contract.new("", "class m(:\n")


def test_new_requires_single_class():
  with pytest.raises(ParseError):
    Contract.new("", "class a: ...\nclass b: ...\n")


def test_parse_reads_decorator_config(flipper_source):
  contract = Contract.parse(flipper_source)

  assert contract.config().original_mod_name == "plain"
  assert contract.original_module().code.startswith('@doc("inline")\nclass plain:\n')
  assert len(contract.module().annotated_items()) == 3


def test_parse_bare_contract_decorator():
  contract = Contract.parse("@ink.contract\nclass C: ...\n")
  assert contract.original_name == "original"


def test_parse_requires_contract_decorator():
  with pytest.raises(ParseError) as excinfo:
    Contract.parse("class C: ...\n")
  assert "@ink.contract" in str(excinfo.value)


def test_contract_config_only_holds_decorator_entries(flipper_source):
  config = contract_config(flipper_source)
  assert config.model_dump(exclude_unset=True) == {"original_mod_name": "plain"}


def test_bad_decorator_config():
  with pytest.raises(ConfigurationError):
    Contract.parse("@ink.contract(unknown=1)\nclass C: ...\n")


def test_parse_renames_contract_not_local_class():
  source = "def factory():\n    class Local: pass\n\n@ink.contract\nclass Flipper: ...\n"
  contract = Contract.parse(source)

  assert contract.module().name == "Flipper"
  assert contract.original_module().renamed.original_name == "Flipper"
  assert "class Local: pass" in contract.original_module().code


def test_illegal_name_error_points_at_decorator():
  source = 'import ink\n\n@ink.contract(original_mod_name="1bad")\nclass C: ...\n'
  with pytest.raises(ConfigurationError) as excinfo:
    Contract.parse(source)

  span = excinfo.value.span
  assert (span.start.line, span.start.column) == (3, 0)
  assert "line 3" in str(excinfo.value)


def test_bad_decorator_config_error_points_at_decorator():
  with pytest.raises(ConfigurationError) as excinfo:
    Contract.parse("\n@ink.contract(unknown=1)\nclass C: ...\n")
  assert excinfo.value.span.start.line == 2
