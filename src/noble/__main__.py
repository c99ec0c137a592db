"""
Entry point for module execution (``python -m noble``).
"""

import sys

from noble.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
