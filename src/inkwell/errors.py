"""
Error Types.

Every failure the frontend can report derives from `InkError`. Errors carry an
optional `CodeRange` so callers can point at the offending source location.

* `ParseError`: the source text is not a valid contract definition.
* `ConfigurationError`: the contract configuration is malformed, including a
  rename target that is not a legal identifier.
"""

from typing import Optional

import libcst as cst
from libcst.metadata import CodePosition, CodeRange


class InkError(Exception):
  """
  Base class for recoverable frontend errors.

  Attributes:
      message (str): Human readable description.
      span (Optional[CodeRange]): Source location of the problem, if known.
  """

  def __init__(self, message: str, span: Optional[CodeRange] = None):
    super().__init__(message)
    self.message = message
    self.span = span

  def __str__(self) -> str:
    if self.span is None:
      return self.message
    return f"{self.message} (line {self.span.start.line}, column {self.span.start.column})"


class ParseError(InkError):
  """Raised when the source cannot be parsed into a contract module."""

  @classmethod
  def from_syntax_error(cls, err: cst.ParserSyntaxError) -> "ParseError":
    """
    Wraps a LibCST syntax error, keeping its position.

    Args:
        err: The error raised by `libcst.parse_module`.

    Returns:
        ParseError: The equivalent frontend error.
    """
    pos = CodePosition(err.raw_line, err.raw_column)
    return cls(f"invalid source: {err.message}", CodeRange(pos, pos))


class ConfigurationError(InkError):
  """
  Raised when the contract configuration is invalid.

  Attributes:
      key (Optional[str]): The configuration key at fault.
  """

  def __init__(self, message: str, key: Optional[str] = None, span: Optional[CodeRange] = None):
    super().__init__(message, span)
    self.key = key
