#!/usr/bin/env python3
"""
VPN Mock API
============

FastAPI-based mock management API for a VPN client. State lives in memory
and resets on every restart.
"""
import sys
from pathlib import Path

# Make the repository root importable when run from a checkout
repo_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(repo_root))

from src.presentation.api.server import main

if __name__ == "__main__":
    main()
