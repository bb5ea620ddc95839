"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Sample contract sources shared across test modules.
- Console isolation so CLI tests do not leak output destinations.
"""

import sys
import textwrap
import pytest
from pathlib import Path

# Add src to path so we can import 'inkwell' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

FLIPPER_SOURCE = textwrap.dedent(
  """\
  @ink.contract(original_mod_name="plain")
  class Flipper:
      @ink.storage
      class Storage:
          value: bool

      @ink(constructor)
      def new(self, init_value: bool):
          self.value = init_value

      @ink.message(payable=True)
      def flip(self):
          self.value = not self.value

      def helper(self):
          pass
  """
)


@pytest.fixture
def flipper_source() -> str:
  """A complete contract with class, call-form and keyword annotations."""
  return FLIPPER_SOURCE


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
  """
  A directory holding an inert pyproject.toml, so config discovery stops
  there instead of walking into the host filesystem.
  """
  (tmp_path / "pyproject.toml").write_text('[project]\nname = "demo"\n', encoding="utf-8")
  return tmp_path


@pytest.fixture(autouse=True)
def isolate_console():
  """Restores the global console after each test."""
  yield
  from inkwell.utils.console import reset_console

  reset_console()
