"""Entry point for the command line tool: python -m renoiseosc"""

import sys

from renoiseosc.cli import main

if __name__ == "__main__":
    sys.exit(main())
