"""
Module execution entry point.

Allows running with: python -m printnode_cli
"""

import sys
from printnode_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
