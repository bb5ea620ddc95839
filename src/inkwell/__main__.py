"""
Entry point for module execution (``python -m inkwell``).
"""

import sys
from inkwell.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
