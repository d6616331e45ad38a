"""Entry point: python -m task_cli"""

import sys

from task_cli.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
