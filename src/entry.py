#!/usr/bin/env python3
"""Entry point for define_env when packaged as zipapp."""

import sys

from define_env.application import main

if __name__ == "__main__":
    exit_code = main()
    sys.exit(exit_code)
