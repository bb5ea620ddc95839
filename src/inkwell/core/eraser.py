"""
Reserved-Attribute Eraser.

Produces the stripped "original" twin of an annotated contract. A single
pre-order pass over the LibCST tree:

1.  Replaces every decorator whose leading path segment is the reserved
    ``ink`` namespace with the neutral marker ``@doc("inline")``. The marker
    keeps the original decorator's whitespace, so it sits on the same line,
    and the original position is recorded on an `ErasedAttribute`.
2.  Renames the first top-level class definition to the resolved target name.

Every other node is left untouched. Because the traversal follows document
order and depends only on (source, target name), two invocations on the same
input always serialize to identical code. `strip_module` is the only entry
point used by both the contract constructor and the code generator.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import libcst as cst
from libcst.metadata import CodeRange, MetadataWrapper, PositionProvider

from inkwell.config import ContractConfig
from inkwell.core.naming import resolve_target_name
from inkwell.errors import ParseError
from inkwell.utils.node_diff import capture_node_source

logger = logging.getLogger(__name__)

RESERVED_NAMESPACE = "ink"
NEUTRAL_MARKER = "doc"
NEUTRAL_PAYLOAD = '"inline"'


@dataclass
class ErasedAttribute:
  """
  Record of a reserved decorator replaced by the neutral marker.
  """

  path: str
  """Dotted path of the erased decorator (e.g. 'ink.message')."""

  original: str
  """Source text of the erased decorator expression."""

  span: CodeRange
  """Position of the original decorator."""


@dataclass
class RenamedModule:
  """
  Record of the class renamed to the twin's name.
  """

  original_name: str
  new_name: str
  span: CodeRange


@dataclass
class RewriteState:
  """
  Per-invocation traversal state. Discarded once the pass completes.
  """

  target_name: str
  module_count: int = 0
  """Top-level classes seen so far."""

  erased: List[ErasedAttribute] = field(default_factory=list)
  renamed: Optional[RenamedModule] = None


@dataclass
class StrippedModule:
  """
  The stripped twin of a contract, serialized and as a tree.
  """

  code: str
  tree: cst.Module
  target_name: str
  erased: List[ErasedAttribute] = field(default_factory=list)
  renamed: Optional[RenamedModule] = None


def attribute_path(expr: cst.BaseExpression) -> Optional[Tuple[str, ...]]:
  """
  Extracts the dotted path of a decorator expression.

  ``ink.message`` and ``ink.message(payable=True)`` both give
  ``("ink", "message")``; ``ink(storage)`` gives ``("ink",)``.

  Args:
      expr: The decorator expression.

  Returns:
      Optional[Tuple[str, ...]]: The path segments, or None if the expression
      is not a (called) dotted name.
  """
  if isinstance(expr, cst.Call):
    expr = expr.func

  parts: List[str] = []
  while isinstance(expr, cst.Attribute):
    parts.append(expr.attr.value)
    expr = expr.value

  if not isinstance(expr, cst.Name):
    return None

  parts.append(expr.value)
  return tuple(reversed(parts))


def is_reserved(decorator: cst.Decorator) -> bool:
  """
  Checks whether a decorator belongs to the reserved namespace.

  Args:
      decorator: The decorator node.

  Returns:
      bool: True if its leading path segment is exactly ``ink``.
  """
  path = attribute_path(decorator.decorator)
  return path is not None and path[0] == RESERVED_NAMESPACE


def neutral_marker() -> cst.Call:
  """
  Builds the inert expression substituted for reserved decorators.

  Returns:
      cst.Call: ``doc("inline")``.
  """
  return cst.Call(
    func=cst.Name(NEUTRAL_MARKER),
    args=[cst.Arg(value=cst.SimpleString(NEUTRAL_PAYLOAD))],
  )


class ReservedAttributeEraser(cst.CSTTransformer):
  """
  Erases reserved decorators and renames the first top-level class definition.

  Must be run through a `MetadataWrapper` so original positions are available.
  """

  METADATA_DEPENDENCIES = (PositionProvider,)

  def __init__(self, state: RewriteState):
    """
    Args:
        state (RewriteState): Fresh state for this pass.
    """
    super().__init__()
    self.state = state
    self._first_module: Optional[cst.ClassDef] = None
    self._top_level: Tuple[cst.ClassDef, ...] = ()

  def visit_Module(self, node: cst.Module) -> bool:
    self._top_level = tuple(stmt for stmt in node.body if isinstance(stmt, cst.ClassDef))
    return True

  def visit_ClassDef(self, node: cst.ClassDef) -> bool:
    # Only classes directly in the module body count; nested ones are still visited.
    if any(node is cls for cls in self._top_level):
      if self.state.module_count == 0:
        self._first_module = node
      self.state.module_count += 1
    return True

  def leave_ClassDef(self, original_node: cst.ClassDef, updated_node: cst.ClassDef) -> cst.ClassDef:
    if original_node is not self._first_module:
      return updated_node

    self.state.renamed = RenamedModule(
      original_name=original_node.name.value,
      new_name=self.state.target_name,
      span=self.get_metadata(PositionProvider, original_node.name),
    )
    logger.debug("Renamed class '%s' to '%s'", original_node.name.value, self.state.target_name)
    return updated_node.with_changes(name=updated_node.name.with_changes(value=self.state.target_name))

  def visit_Decorator(self, node: cst.Decorator) -> bool:
    # A neutral marker has no structure worth visiting.
    return not is_reserved(node)

  def leave_Decorator(self, original_node: cst.Decorator, updated_node: cst.Decorator) -> cst.Decorator:
    if not is_reserved(original_node):
      return updated_node

    record = ErasedAttribute(
      path=".".join(attribute_path(original_node.decorator)),
      original=capture_node_source(original_node.decorator),
      span=self.get_metadata(PositionProvider, original_node),
    )
    self.state.erased.append(record)
    logger.debug("Erased @%s at line %d", record.original, record.span.start.line)
    return updated_node.with_changes(decorator=neutral_marker())


def strip_tree(tree: cst.Module, target_name: str) -> StrippedModule:
  """
  Runs the eraser over an already parsed tree.

  The target name must already be validated (see `resolve_target_name`).

  Args:
      tree (cst.Module): The tree to rewrite. Callers must not reuse it.
      target_name (str): Name given to the first class definition.

  Returns:
      StrippedModule: The rewritten tree, its code and the rewrite records.
  """
  state = RewriteState(target_name=target_name)
  stripped = MetadataWrapper(tree).visit(ReservedAttributeEraser(state))

  return StrippedModule(
    code=stripped.code,
    tree=stripped,
    target_name=target_name,
    erased=state.erased,
    renamed=state.renamed,
  )


def strip_module(source: str, config: Optional[ContractConfig] = None) -> StrippedModule:
  """
  Builds the stripped twin of a contract source.

  The rename target is resolved before the source is parsed, so a bad
  configuration never yields a partial result.

  Args:
      source (str): Raw contract source.
      config (Optional[ContractConfig]): Contract configuration.

  Returns:
      StrippedModule: The stripped twin.

  Raises:
      ConfigurationError: If the rename target is not a legal identifier.
      ParseError: If the source is not valid Python.
  """
  target_name = resolve_target_name(config)

  try:
    tree = cst.parse_module(source)
  except cst.ParserSyntaxError as e:
    raise ParseError.from_syntax_error(e) from e

  return strip_tree(tree, target_name)
