"""
Rendering of Detached Nodes.

Converts arbitrary LibCST nodes to source text "in vacuum", without serializing
the whole module. Used to record the text of erased decorators and to display
annotation arguments.
"""

import libcst as cst

# A dummy module used as a context to render detached nodes.
_RENDER_CTX = cst.parse_module("")


def capture_node_source(node: cst.CSTNode) -> str:
  """
  Renders a LibCST node into its Python source code string representation.

  Args:
      node: The CST node to serialise.

  Returns:
      str: The Python code string.
  """
  try:
    return _RENDER_CTX.code_for_node(node)
  except Exception:
    # Fallback for malformed or partial nodes
    return f"<Unrepresentable Node: {type(node).__name__}>"
