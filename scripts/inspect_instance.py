#!/usr/bin/env python3
import os, sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from explicit_tsp.cli import main

if __name__ == "__main__":
    sys.exit(main())
