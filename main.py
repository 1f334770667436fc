#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py [--size N] [--mines M] [--seed S] [--strict-input]
"""
import sys

from src.minesweeper.console import main


if __name__ == "__main__":
    sys.exit(main())
