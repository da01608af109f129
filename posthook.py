#!/usr/bin/env python3
"""Posthook CLI entry point.

This file allows running posthook directly:
    python posthook.py

For installed usage, use:
    posthook
"""

import sys
from posthook.cli import main

if __name__ == "__main__":
    sys.exit(main())
