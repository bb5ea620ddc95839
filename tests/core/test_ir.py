"""
Tests for the contract IR builder.
"""

import libcst as cst
import pytest
from libcst.metadata import MetadataWrapper

from inkwell.core.ir import build_item_mod, find_contract_class
from inkwell.errors import ParseError


def _build(source: str):
  return build_item_mod(MetadataWrapper(cst.parse_module(source)))


def test_contract_attributes(flipper_source):
  item = _build(flipper_source)

  assert item.name == "Flipper"
  (attr,) = item.attributes
  assert attr.path == "ink.contract"
  assert attr.args == ['original_mod_name="plain"']
  assert attr.span.start.line == 1


def test_items_in_document_order(flipper_source):
  item = _build(flipper_source)

  assert [i.name for i in item.items] == ["Storage", "new", "flip", "helper"]
  assert [i.kind for i in item.items] == ["class", "function", "function", "function"]


def test_annotated_items(flipper_source):
  item = _build(flipper_source)
  annotated = item.annotated_items()

  assert [i.name for i in annotated] == ["Storage", "new", "flip"]
  assert [i.attributes[0].kind for i in annotated] == ["storage", "constructor", "message"]
  assert annotated[2].attributes[0].args == ["payable=True"]


def test_non_reserved_decorators_ignored():
  item = _build("class C:\n    @staticmethod\n    @ink.message\n    def f(): ...\n")

  (func,) = item.items
  assert [a.path for a in func.attributes] == ["ink.message"]


def test_nested_items_walked():
  source = "class C:\n    class A:\n        @ink.event\n        def inner(self): ...\n    def b(self): ...\n"
  item = _build(source)

  assert [i.name for i in item.walk()] == ["A", "inner", "b"]
  assert [i.name for i in item.annotated_items()] == ["inner"]


@pytest.mark.parametrize("source", ["x = 1\n", "class A: ...\nclass B: ...\n"])
def test_single_class_required(source):
  with pytest.raises(ParseError):
    find_contract_class(cst.parse_module(source))
