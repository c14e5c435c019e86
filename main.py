#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py [rows cols mines] [--text] [--seed N] [-v]
"""
import sys
from pathlib import Path

# Run from a checkout without installing
sys.path.insert(0, str(Path(__file__).parent / "src"))

from minesweeper.cli import main


if __name__ == "__main__":
    main()
