#!/usr/bin/env python3
"""
AI PR Description Generator – Gemini Edition

Thin entrypoint that delegates to the modular package in `app/prdesc/`.
Run it from inside a git checkout whose branch already has an open PR.
"""
from __future__ import annotations

import sys

from prdesc.cli import main


if __name__ == "__main__":
    sys.exit(main())
