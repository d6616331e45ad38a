"""Console entry point."""

import sys

from pydantic import ValidationError

from task_cli.cli.app import TaskCLIApp
from task_cli.config import get_settings


def main() -> int:
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Invalid configuration:\n{e}", file=sys.stderr)
        return 2

    app = TaskCLIApp(settings)
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
