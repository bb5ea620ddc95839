"""
Tests for CLI argument handling and dispatch.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from inkwell.cli.__main__ import main


@patch("inkwell.cli.commands.handle_strip", return_value=0)
def test_strip_dispatch(mock_handle):
  assert main(["strip", "contract.py", "--rename", "plain"]) == 0
  mock_handle.assert_called_once_with(Path("contract.py"), None, "plain")


@patch("inkwell.cli.commands.handle_strip", return_value=0)
def test_strip_dispatch_out(mock_handle):
  main(["strip", "contract.py", "--out", "out/original.py"])
  mock_handle.assert_called_once_with(Path("contract.py"), Path("out/original.py"), None)


@patch("inkwell.cli.commands.handle_inspect", return_value=0)
def test_inspect_dispatch(mock_handle):
  main(["inspect", "contract.py", "--json"])
  mock_handle.assert_called_once_with(Path("contract.py"), True)


def test_command_required():
  with pytest.raises(SystemExit):
    main([])
