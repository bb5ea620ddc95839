"""
CLI Command Handlers Facade.

Re-exports the handlers from `inkwell.cli.handlers` so the entry point has a
single module to dispatch to (and tests a single module to patch).
"""

from inkwell.cli.handlers.inspect import handle_inspect
from inkwell.cli.handlers.strip import handle_strip

__all__ = ["handle_inspect", "handle_strip"]
