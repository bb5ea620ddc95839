"""
Neutral Marker Runtime.

The stripped twin of a contract replaces every ``ink`` decorator with
``@doc("inline")``. Bringing `doc` into scope makes the twin importable as
plain Python: the marker returns the decorated object unchanged.
"""

from typing import Any, Callable, TypeVar

T = TypeVar("T")


def doc(*args: Any, **kwargs: Any) -> Callable[[T], T]:
  """
  Builds an identity decorator. All arguments are ignored.

  Returns:
      Callable: A decorator returning its argument as is.
  """

  def _identity(obj: T) -> T:
    return obj

  return _identity
