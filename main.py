# main.py
import sys

from bjj_paths.app.cli import main

if __name__ == "__main__":
    sys.exit(main())
