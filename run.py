#!/usr/bin/env python3
"""
run.py - Main entry point for a two-player Connect Four game in the terminal
"""

import sys

from connect_four.interfaces.cli import main


if __name__ == "__main__":
    main(sys.argv[1:])
