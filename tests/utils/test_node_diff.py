"""
Tests for detached node rendering.
"""

import libcst as cst
from inkwell.utils.node_diff import capture_node_source


def test_capture_decorator_expression():
  node = cst.parse_expression("ink.message(payable=True)")
  assert capture_node_source(node) == "ink.message(payable=True)"


def test_capture_constructed_node():
  node = cst.Call(func=cst.Name("doc"), args=[cst.Arg(cst.SimpleString('"inline"'))])
  assert capture_node_source(node) == 'doc("inline")'


def test_capture_fallback():
  res = capture_node_source("NotANode")  # type: ignore
  assert "<Unrepresentable Node: str>" in res
