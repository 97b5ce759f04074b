#!/usr/bin/env -S uv run
import sys

from interactive.chooser.cli import main


if __name__ == "__main__":
    sys.exit(main())
