"""
Module execution entry point.

Allows running with: python -m minerid_cli
"""

import sys
from minerid_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
