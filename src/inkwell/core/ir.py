"""
Intermediate Representation (IR) of an ink contract.

A structural view of the contract class: its nested classes and functions in
document order, each with the reserved ``ink`` annotations attached to it.
Interpreting the annotations (messages, constructors, events...) is left to
the code generators that consume this model.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Mapping, Optional, Sequence

import libcst as cst
from libcst.metadata import CodeRange, MetadataWrapper, PositionProvider

from inkwell.core.eraser import attribute_path, is_reserved
from inkwell.errors import ParseError
from inkwell.utils.node_diff import capture_node_source


@dataclass
class InkAttribute:
  """
  A reserved decorator, e.g. ``@ink.message(payable=True)``.
  """

  path: str
  """Dotted path of the decorator (e.g. 'ink.message')."""

  args: List[str] = field(default_factory=list)
  """Source text of each argument, keywords included."""

  span: Optional[CodeRange] = None

  @property
  def kind(self) -> str:
    """
    The annotation kind: the path below the namespace ('message'), or the
    first argument for the call form ``@ink(message)``.

    Returns:
        str: Annotation kind, empty if it cannot be determined.
    """
    _, _, rest = self.path.partition(".")
    if rest:
      return rest
    return self.args[0] if self.args else ""


@dataclass
class InkItem:
  """
  A class or function definition inside the contract.
  """

  name: str
  kind: str
  """Either 'class' or 'function'."""

  attributes: List[InkAttribute] = field(default_factory=list)
  items: List["InkItem"] = field(default_factory=list)
  span: Optional[CodeRange] = None

  @property
  def is_annotated(self) -> bool:
    return bool(self.attributes)


@dataclass
class ItemMod:
  """
  The contract class: root of the IR.
  """

  name: str
  attributes: List[InkAttribute] = field(default_factory=list)
  items: List[InkItem] = field(default_factory=list)
  span: Optional[CodeRange] = None

  def walk(self) -> Iterator[InkItem]:
    """
    Yields every item in document (pre-)order.
    """
    stack = list(reversed(self.items))
    while stack:
      item = stack.pop()
      yield item
      stack.extend(reversed(item.items))

  def annotated_items(self) -> List[InkItem]:
    """
    Returns the items carrying at least one reserved annotation.

    Returns:
        List[InkItem]: Items in document order.
    """
    return [item for item in self.walk() if item.is_annotated]


def find_contract_class(tree: cst.Module) -> cst.ClassDef:
  """
  Locates the single top-level class of a contract module.

  Args:
      tree (cst.Module): Parsed contract source.

  Returns:
      cst.ClassDef: The contract class.

  Raises:
      ParseError: If the module does not hold exactly one top-level class.
  """
  classes = [stmt for stmt in tree.body if isinstance(stmt, cst.ClassDef)]
  if len(classes) != 1:
    raise ParseError(f"invalid source: expected a single contract class definition, found {len(classes)}")
  return classes[0]


def build_item_mod(wrapper: MetadataWrapper) -> ItemMod:
  """
  Builds the IR from a metadata-wrapped contract module.

  Args:
      wrapper (MetadataWrapper): Wrapper around the parsed contract source.

  Returns:
      ItemMod: The contract IR.
  """
  positions = wrapper.resolve(PositionProvider)
  class_def = find_contract_class(wrapper.module)

  return ItemMod(
    name=class_def.name.value,
    attributes=_collect_attributes(class_def.decorators, positions),
    items=_collect_items(class_def.body, positions),
    span=positions[class_def],
  )


def _collect_attributes(
  decorators: Sequence[cst.Decorator], positions: Mapping[cst.CSTNode, CodeRange]
) -> List[InkAttribute]:
  attrs = []
  for decorator in decorators:
    if not is_reserved(decorator):
      continue

    expr = decorator.decorator
    args = []
    if isinstance(expr, cst.Call):
      args = [_render_arg(arg) for arg in expr.args]

    attrs.append(
      InkAttribute(
        path=".".join(attribute_path(expr)),
        args=args,
        span=positions[decorator],
      )
    )
  return attrs


def _collect_items(body: cst.BaseSuite, positions: Mapping[cst.CSTNode, CodeRange]) -> List[InkItem]:
  # One-line suites (`class A: pass`) hold no definitions.
  if not isinstance(body, cst.IndentedBlock):
    return []

  items = []
  for stmt in body.body:
    if isinstance(stmt, cst.ClassDef):
      items.append(
        InkItem(
          name=stmt.name.value,
          kind="class",
          attributes=_collect_attributes(stmt.decorators, positions),
          items=_collect_items(stmt.body, positions),
          span=positions[stmt],
        )
      )
    elif isinstance(stmt, cst.FunctionDef):
      items.append(
        InkItem(
          name=stmt.name.value,
          kind="function",
          attributes=_collect_attributes(stmt.decorators, positions),
          span=positions[stmt],
        )
      )
  return items


def _render_arg(arg: cst.Arg) -> str:
  value = capture_node_source(arg.value)
  if arg.keyword is not None:
    return f"{arg.keyword.value}={value}"
  return f"{arg.star}{value}"
